"""
Port UserRepository - Interface pour la lecture des utilisateurs.
"""

from abc import ABC, abstractmethod
from uuid import UUID

from postdesk.domain.entities.user import User


class UserRepository(ABC):
    """
    Interface Repository pour les utilisateurs.

    Contrat pour la persistance des entites User.
    Implementee par MemoryUserRepository.
    """

    @abstractmethod
    def save(self, user: User) -> User:
        """Persiste un utilisateur (create ou update)."""
        ...

    @abstractmethod
    def get_by_id(self, user_id: UUID) -> User | None:
        """Recupere un utilisateur par son ID."""
        ...

    @abstractmethod
    def get_by_username(self, username: str) -> User | None:
        """Recupere un utilisateur par son username."""
        ...
