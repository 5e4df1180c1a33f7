"""
PostTransformer - Article vers PostResource.
"""

from pydantic import BaseModel

from postdesk.domain.entities.post import Post
from postdesk.presentation.transformers.base import Transformer


class PostResource(BaseModel):
    """Representation d'un article dans les listes."""

    id: int | None = None
    title: str
    excerpt: str = ""
    url: str | None = None


class PostTransformer(Transformer[Post, PostResource]):
    """
    Transforme un Post en PostResource.

    Example:
        >>> PostTransformer().transform(Post(id=7, title="Hi", body="there"))
        PostResource(id=7, title='Hi', excerpt='there', url='/posts/7/edit')
    """

    def __init__(self, excerpt_length: int = 80) -> None:
        """
        Args:
            excerpt_length: Longueur max de l'extrait.
        """
        self._excerpt_length = excerpt_length

    def transform(self, entity: Post) -> PostResource:
        return PostResource(
            id=entity.id,
            title=entity.title,
            excerpt=entity.excerpt(self._excerpt_length),
            url=f"/posts/{entity.id}/edit" if entity.is_persisted else None,
        )
