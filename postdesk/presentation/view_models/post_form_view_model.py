"""
View Model du formulaire d'article (creation et edition).

Encapsule les donnees dont le formulaire a besoin: l'article edite
(ou un brouillon vierge) et les rubriques ouvertes a l'acteur.
"""

from postdesk.application.ports.repositories.category_repository import (
    CategoryRepository,
)
from postdesk.domain.entities.post import Post
from postdesk.domain.entities.user import User
from postdesk.presentation.view_models.base import ViewModel


class PostFormViewModel(ViewModel):
    """
    View Model du formulaire d'article.

    Example:
        >>> vm = PostFormViewModel(user, category_repo)
        >>> vm["post"]
        '{"id":null,"title":"","body":""}'
        >>> vm.form_method()
        'POST'
    """

    def __init__(
        self,
        user: User,
        category_repository: CategoryRepository,
        post: Post | None = None,
    ) -> None:
        """
        Initialise le view model.

        Args:
            user: Acteur courant.
            category_repository: Repository des rubriques.
            post: Article edite (None pour une creation).
        """
        self._user = user
        self._categories = category_repository
        self._post = post

    def post(self) -> Post:
        """Article edite, ou brouillon vierge."""
        if self._post is None:
            return Post.draft()
        return self._post

    def categories(self) -> list[str]:
        """Noms des rubriques dans lesquelles l'acteur peut publier."""
        return [category.name for category in self._categories.find_for_user(self._user)]

    def form_action(self) -> str:
        if self._post is not None and self._post.is_persisted:
            return f"/posts/{self._post.id}"
        return "/posts"

    def form_method(self) -> str:
        if self._post is not None and self._post.is_persisted:
            return "PUT"
        return "POST"
