"""
Use Case: Creation ou mise a jour d'un article.
"""

from dataclasses import dataclass

from postdesk.application.ports.repositories.post_repository import PostRepository
from postdesk.domain.entities.post import Post
from postdesk.domain.exceptions import PostNotFoundError
from postdesk.infrastructure.logging import get_logger

logger = get_logger(__name__)


@dataclass
class SavePostRequest:
    """
    Requete de sauvegarde d'un article.

    Attributes:
        title: Titre de l'article.
        body: Contenu de l'article.
        post_id: ID de l'article a modifier (None pour une creation).
    """

    title: str
    body: str = ""
    post_id: int | None = None


@dataclass
class SavePostResponse:
    """
    Reponse de la sauvegarde.

    Attributes:
        post: Article sauvegarde (avec son identifiant).
        created: True si l'article vient d'etre cree.
    """

    post: Post
    created: bool


class SavePostUseCase:
    """
    Use Case: Sauvegarde d'un article.

    Example:
        >>> use_case = SavePostUseCase(post_repo)
        >>> response = use_case.execute(SavePostRequest(title="Hi"))
        >>> response.post.id
        1
    """

    def __init__(self, post_repository: PostRepository) -> None:
        """
        Initialise le use case.

        Args:
            post_repository: Repository des articles.
        """
        self._posts = post_repository

    def execute(self, request: SavePostRequest) -> SavePostResponse:
        """
        Cree ou met a jour l'article.

        Raises:
            PostNotFoundError: Si l'article a modifier n'existe pas.
            InvalidPostError: Si le titre est invalide.
        """
        if request.post_id is None:
            post = Post.create(request.title, request.body)
            created = True
        else:
            post = self._posts.get_by_id(request.post_id)
            if post is None:
                raise PostNotFoundError(request.post_id)
            post.update(request.title, request.body)
            created = False

        post = self._posts.save(post)
        logger.info("post_saved", post_id=post.id, created=created)

        return SavePostResponse(post=post, created=created)
