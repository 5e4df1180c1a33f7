"""
Interface du repository de rubriques.
"""

from abc import ABC, abstractmethod

from postdesk.domain.entities.category import Category
from postdesk.domain.entities.user import User


class CategoryRepository(ABC):
    """Interface pour la lecture des rubriques."""

    @abstractmethod
    def find_all(self) -> list[Category]:
        """Liste toutes les rubriques, triees par position."""
        pass

    @abstractmethod
    def find_for_user(self, user: User) -> list[Category]:
        """
        Liste les rubriques dans lesquelles un utilisateur peut publier.

        Args:
            user: Utilisateur courant.

        Returns:
            Rubriques ouvertes a son role, triees par position.
        """
        pass
