"""
View Model de la liste des articles.
"""

from postdesk.application.ports.repositories.post_repository import PostRepository
from postdesk.domain.entities.user import User
from postdesk.presentation.transformers.post_transformer import (
    PostResource,
    PostTransformer,
)
from postdesk.presentation.view_models.base import ViewModel
from postdesk.presentation.view_models.naming import KeyStyle


class PostIndexViewModel(ViewModel):
    """
    View Model de la liste des articles.

    Les cles du mapping sont en camelCase pour le client JavaScript
    (`canCreate`), les noms snake_case restent resolvables.
    """

    key_style = KeyStyle.CAMEL

    def __init__(
        self,
        user: User,
        post_repository: PostRepository,
        transformer: PostTransformer | None = None,
        limit: int = 50,
    ) -> None:
        """
        Initialise le view model.

        Args:
            user: Acteur courant.
            post_repository: Repository des articles.
            transformer: Transformer des articles (defaut: PostTransformer).
            limit: Nombre max d'articles listes.
        """
        self._user = user
        self._posts = post_repository
        self._transformer = transformer or PostTransformer()
        self._limit = limit

    def heading(self) -> str:
        return "Articles"

    def posts(self) -> list[PostResource]:
        """Articles les plus recents, sous forme de ressources."""
        return self._transformer.collection(self._posts.find_all(limit=self._limit))

    def total(self) -> int:
        return self._posts.count()

    def can_create(self) -> bool:
        """True si l'acteur peut creer un article (affichage du bouton)."""
        return self._user.can("posts_create")
