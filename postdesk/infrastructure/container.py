"""
Container d'injection de dependances.

Ce module fournit un conteneur qui initialise et connecte les
repositories, les use cases et le transformer, et qui fabrique les
view models a la demande.

Les view models ne sont jamais remplis par un registre global: chaque
fabrique recoit explicitement l'acteur courant et construit le view
model avec ses dependances.
"""

from dataclasses import dataclass

from postdesk.application.ports.repositories.category_repository import (
    CategoryRepository,
)
from postdesk.application.ports.repositories.post_repository import PostRepository
from postdesk.application.ports.repositories.user_repository import UserRepository
from postdesk.application.use_cases.delete_post import DeletePostUseCase
from postdesk.application.use_cases.save_post import SavePostUseCase
from postdesk.domain.entities.category import Category
from postdesk.domain.entities.post import Post
from postdesk.domain.entities.user import User
from postdesk.domain.exceptions import PostNotFoundError, UserNotFoundError
from postdesk.domain.value_objects.role import RoleLevel
from postdesk.infrastructure.adapters.memory_category_repository import (
    MemoryCategoryRepository,
)
from postdesk.infrastructure.adapters.memory_post_repository import MemoryPostRepository
from postdesk.infrastructure.adapters.memory_user_repository import MemoryUserRepository
from postdesk.presentation.transformers.post_transformer import PostTransformer
from postdesk.presentation.view_models.post_form_view_model import PostFormViewModel
from postdesk.presentation.view_models.post_index_view_model import PostIndexViewModel


@dataclass
class Container:
    """
    Conteneur d'injection de dependances.

    Example:
        >>> container = Container.create()
        >>> vm = container.post_form(user)
        >>> vm["post"]
        '{"id":null,"title":"","body":""}'
    """

    # Repositories
    user_repository: UserRepository
    post_repository: PostRepository
    category_repository: CategoryRepository

    # Use Cases
    save_post_use_case: SavePostUseCase
    delete_post_use_case: DeletePostUseCase

    # Presentation
    post_transformer: PostTransformer

    @classmethod
    def create(
        cls,
        user_repository: UserRepository | None = None,
        post_repository: PostRepository | None = None,
        category_repository: CategoryRepository | None = None,
    ) -> "Container":
        """
        Factory pour creer un conteneur avec toutes les dependances.

        Args:
            user_repository: Repository des utilisateurs (defaut: memoire).
            post_repository: Repository des articles (defaut: memoire).
            category_repository: Repository des rubriques (defaut: memoire).

        Returns:
            Container configure.
        """
        user_repository = user_repository or MemoryUserRepository()
        post_repository = post_repository or MemoryPostRepository()
        category_repository = category_repository or MemoryCategoryRepository()

        return cls(
            user_repository=user_repository,
            post_repository=post_repository,
            category_repository=category_repository,
            save_post_use_case=SavePostUseCase(post_repository),
            delete_post_use_case=DeletePostUseCase(post_repository),
            post_transformer=PostTransformer(),
        )

    @classmethod
    def create_with_demo_data(cls) -> "Container":
        """Cree un conteneur en memoire avec des donnees de demonstration."""
        users = [
            User.create("admin", "admin@postdesk.local", role="admin"),
            User.create("editor", "editor@postdesk.local", role="editor"),
            User.create("viewer", "viewer@postdesk.local", role="viewer"),
        ]
        categories = [
            Category(id=1, name="Actualites", position=1),
            Category(id=2, name="Tutoriels", position=2),
            Category(
                id=3,
                name="Annonces",
                allowed_roles=frozenset({RoleLevel.ADMIN}),
                position=3,
            ),
        ]
        posts = [
            Post.create("Bienvenue", "Premier article du back office."),
            Post.create("View models", "Des donnees de presentation explicites."),
        ]

        return cls.create(
            user_repository=MemoryUserRepository(users),
            post_repository=MemoryPostRepository(posts),
            category_repository=MemoryCategoryRepository(categories),
        )

    def current_user(self, username: str) -> User:
        """
        Retourne l'acteur courant.

        Raises:
            UserNotFoundError: Si l'utilisateur est inconnu ou inactif.
        """
        user = self.user_repository.get_by_username(username)
        if user is None or not user.is_active:
            raise UserNotFoundError(username)
        return user

    # ViewModels

    def post_form(self, user: User, post_id: int | None = None) -> PostFormViewModel:
        """
        Construit le formulaire d'article.

        Args:
            user: Acteur courant.
            post_id: Article a editer (None pour une creation).

        Raises:
            PostNotFoundError: Si l'article n'existe pas.
        """
        post = None
        if post_id is not None:
            post = self.post_repository.get_by_id(post_id)
            if post is None:
                raise PostNotFoundError(post_id)

        return PostFormViewModel(
            user=user,
            category_repository=self.category_repository,
            post=post,
        )

    def post_index(self, user: User, limit: int = 50) -> PostIndexViewModel:
        """Construit la liste des articles pour l'acteur courant."""
        return PostIndexViewModel(
            user=user,
            post_repository=self.post_repository,
            transformer=self.post_transformer,
            limit=limit,
        )


# Singleton global pour l'API
_container: Container | None = None


def get_container(seed_demo_data: bool = False) -> Container:
    """
    Recupere ou cree le conteneur global.

    Args:
        seed_demo_data: Charger les donnees de demonstration a la creation.
    """
    global _container
    if _container is None:
        _container = Container.create_with_demo_data() if seed_demo_data else Container.create()
    return _container


def reset_container() -> None:
    """Reset le conteneur global (utile pour les tests)."""
    global _container
    _container = None
