"""
Tests unitaires pour l'API REST.

Teste les endpoints articles avec un conteneur de demonstration.
"""

import json

import pytest
from fastapi.testclient import TestClient

from postdesk.infrastructure.container import Container
from postdesk.presentation.api.config import APISettings
from postdesk.presentation.api.dependencies import get_app_container
from postdesk.presentation.api.main import create_app

PREFIX = "/api/v1/posts"


@pytest.fixture
def container() -> Container:
    """Conteneur de demonstration isole par test."""
    return Container.create_with_demo_data()


@pytest.fixture
def client(container: Container) -> TestClient:
    """Client HTTP sur une application neuve."""
    app = create_app(APISettings())
    app.dependency_overrides[get_app_container] = lambda: container
    return TestClient(app)


def as_user(username: str) -> dict[str, str]:
    return {"X-Username": username}


# ============================================================
# Tests Health / Acteur
# ============================================================


class TestHealth:
    """Tests pour /health."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestCurrentUser:
    """Resolution de l'acteur depuis le header X-Username."""

    def test_missing_header(self, client: TestClient) -> None:
        """Sans header: 401."""
        response = client.get(PREFIX)

        assert response.status_code == 401
        assert response.json()["detail"] == "Header X-Username manquant"

    def test_unknown_user(self, client: TestClient) -> None:
        """Utilisateur inconnu: 401."""
        response = client.get(PREFIX, headers=as_user("ghost"))

        assert response.status_code == 401

    def test_inactive_user(self, client: TestClient, container: Container) -> None:
        """Utilisateur desactive: 401."""
        container.user_repository.get_by_username("viewer").deactivate()

        response = client.get(PREFIX, headers=as_user("viewer"))

        assert response.status_code == 401

    def test_username_case_insensitive(self, client: TestClient) -> None:
        """Le nom d'utilisateur n'est pas sensible a la casse."""
        response = client.get(PREFIX, headers=as_user("Editor"))

        assert response.status_code == 200


# ============================================================
# Tests lecture
# ============================================================


class TestReadEndpoints:
    """Tests des endpoints de lecture."""

    def test_index(self, client: TestClient) -> None:
        """La liste renvoie le payload du view model en camelCase."""
        response = client.get(PREFIX, headers=as_user("editor"))

        assert response.status_code == 200
        data = response.json()
        assert list(data) == ["heading", "posts", "total", "canCreate"]
        assert data["total"] == 2
        assert data["canCreate"] is True
        assert [p["title"] for p in data["posts"]] == ["View models", "Bienvenue"]

    def test_index_for_viewer(self, client: TestClient) -> None:
        """Un lecteur ne peut pas creer."""
        response = client.get(PREFIX, headers=as_user("viewer"))

        assert response.json()["canCreate"] is False

    def test_create_form(self, client: TestClient) -> None:
        """Formulaire vierge avec les rubriques de l'acteur."""
        response = client.get(f"{PREFIX}/create", headers=as_user("editor"))

        assert response.status_code == 200
        assert response.json() == {
            "post": {"id": None, "title": "", "body": ""},
            "categories": ["Actualites", "Tutoriels"],
            "form_action": "/posts",
            "form_method": "POST",
        }

    def test_create_form_for_admin(self, client: TestClient) -> None:
        """Un admin voit aussi les rubriques reservees."""
        response = client.get(f"{PREFIX}/create", headers=as_user("admin"))

        assert response.json()["categories"] == ["Actualites", "Tutoriels", "Annonces"]

    def test_edit_form(self, client: TestClient) -> None:
        """Formulaire d'un article existant."""
        response = client.get(f"{PREFIX}/1/edit", headers=as_user("editor"))

        assert response.status_code == 200
        data = response.json()
        assert data["post"]["title"] == "Bienvenue"
        assert data["form_action"] == "/posts/1"
        assert data["form_method"] == "PUT"

    def test_edit_form_not_found(self, client: TestClient) -> None:
        """Article inexistant: 404."""
        response = client.get(f"{PREFIX}/99/edit", headers=as_user("editor"))

        assert response.status_code == 404
        assert response.json()["detail"] == "Article non trouve"


class TestFieldEndpoint:
    """Tests de l'acces dynamique a une propriete."""

    def test_structured_field(self, client: TestClient) -> None:
        """Une valeur structuree est renvoyee en JSON texte."""
        response = client.get(f"{PREFIX}/1/edit/post", headers=as_user("editor"))

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert json.loads(response.text) == {
            "id": 1,
            "title": "Bienvenue",
            "body": "Premier article du back office.",
        }

    def test_text_field(self, client: TestClient) -> None:
        """Une valeur texte est renvoyee telle quelle."""
        response = client.get(f"{PREFIX}/1/edit/form-method", headers=as_user("editor"))

        assert response.status_code == 200
        assert response.text == "PUT"

    def test_camel_case_field(self, client: TestClient) -> None:
        response = client.get(f"{PREFIX}/1/edit/formAction", headers=as_user("editor"))

        assert response.text == "/posts/1"

    def test_unknown_field(self, client: TestClient) -> None:
        """Nom non expose: 404."""
        response = client.get(
            f"{PREFIX}/1/edit/unknownField", headers=as_user("editor")
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Propriete non exposee: unknownField"

    def test_reserved_member_not_exposed(self, client: TestClient) -> None:
        """Les methodes de ViewModel ne sont pas accessibles."""
        response = client.get(f"{PREFIX}/1/edit/to-dict", headers=as_user("editor"))

        assert response.status_code == 404


# ============================================================
# Tests ecriture
# ============================================================


class TestWriteEndpoints:
    """Apres une ecriture, l'API renvoie un view model frais."""

    def test_create_post(self, client: TestClient) -> None:
        """Creation: 201 et formulaire d'edition du nouvel article."""
        response = client.post(
            PREFIX,
            json={"title": "Nouveau", "body": "Texte"},
            headers=as_user("editor"),
        )

        assert response.status_code == 201
        data = response.json()
        assert data["post"] == {"id": 3, "title": "Nouveau", "body": "Texte"}
        assert data["form_method"] == "PUT"
        assert data["form_action"] == "/posts/3"

    def test_create_post_blank_title(self, client: TestClient) -> None:
        """Titre vide: 422."""
        response = client.post(
            PREFIX,
            json={"title": "   "},
            headers=as_user("editor"),
        )

        assert response.status_code == 422

    def test_create_post_title_too_long(self, client: TestClient) -> None:
        """Titre trop long: 422 (validation du schema)."""
        response = client.post(
            PREFIX,
            json={"title": "x" * 201},
            headers=as_user("editor"),
        )

        assert response.status_code == 422

    def test_update_post(self, client: TestClient, container: Container) -> None:
        """Modification: formulaire a jour."""
        response = client.put(
            f"{PREFIX}/2",
            json={"title": "Renomme", "body": ""},
            headers=as_user("editor"),
        )

        assert response.status_code == 200
        assert response.json()["post"] == {"id": 2, "title": "Renomme", "body": ""}
        assert container.post_repository.get_by_id(2).title == "Renomme"

    def test_update_post_not_found(self, client: TestClient) -> None:
        response = client.put(
            f"{PREFIX}/99",
            json={"title": "Renomme"},
            headers=as_user("editor"),
        )

        assert response.status_code == 404

    def test_delete_post(self, client: TestClient) -> None:
        """Suppression: liste a jour, puis 404 sur le meme article."""
        response = client.delete(f"{PREFIX}/1", headers=as_user("admin"))

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert [p["id"] for p in data["posts"]] == [2]

        response = client.delete(f"{PREFIX}/1", headers=as_user("admin"))
        assert response.status_code == 404
