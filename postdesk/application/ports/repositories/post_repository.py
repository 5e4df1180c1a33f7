"""
Interface du repository d'articles.
"""

from abc import ABC, abstractmethod

from postdesk.domain.entities.post import Post


class PostRepository(ABC):
    """
    Interface pour la persistance des articles.

    L'identifiant d'un article est attribue par le repository
    lors de sa premiere sauvegarde.
    """

    @abstractmethod
    def get_by_id(self, post_id: int) -> Post | None:
        """
        Recupere un article par son ID.

        Args:
            post_id: ID de l'article.

        Returns:
            Post si trouve, None sinon.
        """
        pass

    @abstractmethod
    def find_all(self, limit: int | None = None) -> list[Post]:
        """
        Liste les articles, du plus recent au plus ancien.

        Args:
            limit: Nombre max d'articles.
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Nombre total d'articles."""
        pass

    @abstractmethod
    def save(self, post: Post) -> Post:
        """
        Persiste un article (create ou update).

        Returns:
            L'article avec son identifiant.
        """
        pass

    @abstractmethod
    def delete(self, post_id: int) -> bool:
        """
        Supprime un article.

        Returns:
            True si un article a ete supprime.
        """
        pass
