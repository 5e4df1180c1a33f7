"""
Tests unitaires pour les repositories en memoire.
"""

from postdesk.domain.entities.category import Category
from postdesk.domain.entities.post import Post
from postdesk.domain.entities.user import User
from postdesk.infrastructure.adapters.memory_category_repository import (
    MemoryCategoryRepository,
)
from postdesk.infrastructure.adapters.memory_post_repository import MemoryPostRepository
from postdesk.infrastructure.adapters.memory_user_repository import MemoryUserRepository


class TestMemoryPostRepository:
    """Tests pour MemoryPostRepository."""

    def test_save_assigns_sequential_ids(self) -> None:
        repo = MemoryPostRepository()

        first = repo.save(Post.create("A"))
        second = repo.save(Post.create("B"))

        assert (first.id, second.id) == (1, 2)

    def test_save_keeps_existing_id(self) -> None:
        repo = MemoryPostRepository([Post(id=7, title="Hi")])

        assert repo.get_by_id(7).title == "Hi"
        assert repo.save(Post.create("Next")).id == 8

    def test_find_all_newest_first(self, post_repository: MemoryPostRepository) -> None:
        assert [p.id for p in post_repository.find_all()] == [2, 1]
        assert [p.id for p in post_repository.find_all(limit=1)] == [2]

    def test_delete(self, post_repository: MemoryPostRepository) -> None:
        assert post_repository.delete(1) is True
        assert post_repository.delete(1) is False
        assert post_repository.count() == 1

    def test_get_missing(self) -> None:
        assert MemoryPostRepository().get_by_id(1) is None

    def test_read_post_is_a_copy(self, post_repository: MemoryPostRepository) -> None:
        """Modifier un article lu ne touche pas le stockage avant save."""
        post = post_repository.get_by_id(1)
        post.update("Modifie", "Nouveau corps")

        stored = post_repository.get_by_id(1)
        assert (stored.title, stored.body) == ("Premier", "Contenu du premier article.")
        assert post_repository.find_all()[1].title == "Premier"

        post_repository.save(post)
        assert post_repository.get_by_id(1).title == "Modifie"

    def test_saved_post_is_a_copy(self) -> None:
        """L'objet passe a save peut changer sans effet sur le stockage."""
        repo = MemoryPostRepository()
        post = repo.save(Post.create("A"))

        post.title = "B"

        assert repo.get_by_id(post.id).title == "A"


class TestMemoryCategoryRepository:
    """Tests pour MemoryCategoryRepository."""

    def test_find_all_sorted_by_position(
        self, category_repository: MemoryCategoryRepository
    ) -> None:
        assert [c.name for c in category_repository.find_all()] == ["A", "B", "C"]

    def test_find_for_user(
        self,
        category_repository: MemoryCategoryRepository,
        admin: User,
        viewer: User,
    ) -> None:
        assert [c.name for c in category_repository.find_for_user(viewer)] == ["A", "B"]
        assert [c.name for c in category_repository.find_for_user(admin)] == [
            "A",
            "B",
            "C",
        ]

    def test_add(self, category_repository: MemoryCategoryRepository) -> None:
        category_repository.add(Category(id=4, name="D", position=0))

        assert category_repository.find_all()[0].name == "D"


class TestMemoryUserRepository:
    """Tests pour MemoryUserRepository."""

    def test_get_by_username(self, editor: User) -> None:
        repo = MemoryUserRepository([editor])

        assert repo.get_by_username(" Editor ") is editor
        assert repo.get_by_username("ghost") is None

    def test_get_by_id(self, editor: User) -> None:
        repo = MemoryUserRepository()
        repo.save(editor)

        assert repo.get_by_id(editor.id) is editor
