"""
MemoryPostRepository - Implementation en memoire du PostRepository.
"""

from dataclasses import replace
from threading import Lock

from postdesk.application.ports.repositories.post_repository import PostRepository
from postdesk.domain.entities.post import Post


class MemoryPostRepository(PostRepository):
    """
    PostRepository en memoire.

    Les identifiants sont attribues sequentiellement a partir de 1.
    Le repository stocke et retourne des copies: un article lu n'est
    modifie dans le stockage que par `save`.

    Example:
        >>> repo = MemoryPostRepository()
        >>> repo.save(Post.create("Hi")).id
        1
    """

    def __init__(self, posts: list[Post] | None = None) -> None:
        """
        Initialise le repository.

        Args:
            posts: Articles initiaux (ceux sans ID en recoivent un).
        """
        self._posts: dict[int, Post] = {}
        self._next_id = 1
        self._lock = Lock()

        for post in posts or []:
            self.save(post)

    def get_by_id(self, post_id: int) -> Post | None:
        with self._lock:
            post = self._posts.get(post_id)
            return replace(post) if post is not None else None

    def find_all(self, limit: int | None = None) -> list[Post]:
        with self._lock:
            posts = [replace(p) for p in self._posts.values()]
        posts.sort(key=lambda p: p.id, reverse=True)
        return posts if limit is None else posts[:limit]

    def count(self) -> int:
        with self._lock:
            return len(self._posts)

    def save(self, post: Post) -> Post:
        with self._lock:
            if post.id is None:
                post.id = self._next_id
            self._next_id = max(self._next_id, post.id + 1)
            self._posts[post.id] = replace(post)
            return post

    def delete(self, post_id: int) -> bool:
        with self._lock:
            return self._posts.pop(post_id, None) is not None
