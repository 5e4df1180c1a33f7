"""
Use Case: Suppression d'un article.
"""

from dataclasses import dataclass

from postdesk.application.ports.repositories.post_repository import PostRepository
from postdesk.domain.exceptions import PostNotFoundError
from postdesk.infrastructure.logging import get_logger

logger = get_logger(__name__)


@dataclass
class DeletePostRequest:
    """Requete de suppression d'un article."""

    post_id: int


class DeletePostUseCase:
    """Use Case: Suppression d'un article."""

    def __init__(self, post_repository: PostRepository) -> None:
        self._posts = post_repository

    def execute(self, request: DeletePostRequest) -> None:
        """
        Supprime l'article.

        Raises:
            PostNotFoundError: Si l'article n'existe pas.
        """
        if not self._posts.delete(request.post_id):
            raise PostNotFoundError(request.post_id)
        logger.info("post_deleted", post_id=request.post_id)
