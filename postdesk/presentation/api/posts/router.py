"""
Posts Router - Endpoints du back office articles.

Responsabilite unique:
----------------------
Construire les view models et les renvoyer comme corps de reponse.
Apres une ecriture, l'endpoint renvoie le view model frais au lieu
d'une redirection.

Endpoints:
----------
- GET /posts: Liste des articles
- GET /posts/create: Formulaire vierge
- GET /posts/{id}/edit: Formulaire d'edition
- GET /posts/{id}/edit/{field}: Une propriete du formulaire (texte)
- POST /posts: Creer un article
- PUT /posts/{id}: Modifier un article
- DELETE /posts/{id}: Supprimer un article
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse, PlainTextResponse

from postdesk.application.use_cases.delete_post import DeletePostRequest
from postdesk.application.use_cases.save_post import SavePostRequest
from postdesk.domain.entities.user import User
from postdesk.domain.exceptions import InvalidPostError, PostNotFoundError
from postdesk.infrastructure.container import Container
from postdesk.infrastructure.logging import get_logger
from postdesk.presentation.api.dependencies import get_app_container, get_current_user
from postdesk.presentation.api.posts.schemas import WritePostRequest
from postdesk.presentation.view_models.exceptions import (
    SerializationError,
    UnresolvedName,
)
from postdesk.presentation.view_models.post_form_view_model import PostFormViewModel

logger = get_logger(__name__)

router = APIRouter(prefix="/posts", tags=["Posts"])


# ============ Helpers ============

def _post_form(container: Container, user: User, post_id: int | None) -> PostFormViewModel:
    """Construit le formulaire ou leve une 404."""
    try:
        return container.post_form(user, post_id)
    except PostNotFoundError:
        logger.warning("post_not_found", post_id=post_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Article non trouve",
        )


def _save(container: Container, request: SavePostRequest) -> int:
    """Execute la sauvegarde et retourne l'ID de l'article."""
    try:
        response = container.save_post_use_case.execute(request)
    except PostNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Article non trouve",
        )
    except InvalidPostError as e:
        raise HTTPException(
            status_code=422,
            detail=e.message,
        )
    return response.post.id


# ============ Endpoints ============

@router.get(
    "",
    response_class=JSONResponse,
    summary="Lister les articles",
)
def list_posts(
    user: User = Depends(get_current_user),
    container: Container = Depends(get_app_container),
):
    """Retourne le view model de la liste des articles."""
    return container.post_index(user).to_response()


@router.get(
    "/create",
    response_class=JSONResponse,
    summary="Formulaire de creation",
)
def create_form(
    user: User = Depends(get_current_user),
    container: Container = Depends(get_app_container),
):
    """Retourne le formulaire vierge."""
    return _post_form(container, user, None).to_response()


@router.get(
    "/{post_id}/edit",
    response_class=JSONResponse,
    summary="Formulaire d'edition",
)
def edit_form(
    post_id: int,
    user: User = Depends(get_current_user),
    container: Container = Depends(get_app_container),
):
    """Retourne le formulaire d'un article existant."""
    return _post_form(container, user, post_id).to_response()


@router.get(
    "/{post_id}/edit/{field}",
    response_class=PlainTextResponse,
    summary="Propriete du formulaire",
    description="Une seule propriete, par nom (post, categories, form-action...).",
)
def edit_form_field(
    post_id: int,
    field: str,
    user: User = Depends(get_current_user),
    container: Container = Depends(get_app_container),
):
    """Retourne une propriete du formulaire sous forme de texte."""
    vm = _post_form(container, user, post_id)

    try:
        value = vm[field]
    except UnresolvedName:
        logger.warning("view_model_field_not_exposed", field=field)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Propriete non exposee: {field}",
        )
    except SerializationError as e:
        logger.error("view_model_field_not_serializable", field=field, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Propriete non serialisable",
        )

    return PlainTextResponse(value)


@router.post(
    "",
    response_class=JSONResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Creer un article",
    description="Cree l'article et renvoie le formulaire d'edition a jour.",
)
def create_post(
    data: WritePostRequest,
    user: User = Depends(get_current_user),
    container: Container = Depends(get_app_container),
):
    """Cree un article."""
    post_id = _save(container, SavePostRequest(title=data.title, body=data.body))
    return _post_form(container, user, post_id).to_response(
        status_code=status.HTTP_201_CREATED,
    )


@router.put(
    "/{post_id}",
    response_class=JSONResponse,
    summary="Modifier un article",
    description="Modifie l'article et renvoie le formulaire d'edition a jour.",
)
def update_post(
    post_id: int,
    data: WritePostRequest,
    user: User = Depends(get_current_user),
    container: Container = Depends(get_app_container),
):
    """Modifie un article."""
    _save(
        container,
        SavePostRequest(title=data.title, body=data.body, post_id=post_id),
    )
    return _post_form(container, user, post_id).to_response()


@router.delete(
    "/{post_id}",
    response_class=JSONResponse,
    summary="Supprimer un article",
    description="Supprime l'article et renvoie la liste a jour.",
)
def delete_post(
    post_id: int,
    user: User = Depends(get_current_user),
    container: Container = Depends(get_app_container),
):
    """Supprime un article."""
    try:
        container.delete_post_use_case.execute(DeletePostRequest(post_id=post_id))
    except PostNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Article non trouve",
        )

    return container.post_index(user).to_response()
