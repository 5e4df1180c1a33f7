"""
Exceptions metier du domaine.

Ces exceptions representent des violations des regles metier
et sont independantes de l'infrastructure.
"""

from typing import Any


class DomainException(Exception):
    """Exception de base pour toutes les erreurs du domaine."""

    def __init__(self, message: str, code: str | None = None) -> None:
        """
        Initialise une exception du domaine.

        Args:
            message: Message d'erreur descriptif.
            code: Code d'erreur optionnel pour identification programmatique.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class PostNotFoundError(DomainException):
    """Leve quand un article n'existe pas."""

    def __init__(self, post_id: Any) -> None:
        super().__init__(
            f"Article introuvable: '{post_id}'.",
            code="POST_NOT_FOUND"
        )
        self.post_id = post_id


class InvalidPostError(DomainException):
    """Leve quand un article ne respecte pas les regles de redaction."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Article invalide: {reason}", code="INVALID_POST")
        self.reason = reason


class UserNotFoundError(DomainException):
    """Leve quand un utilisateur n'existe pas ou est inactif."""

    def __init__(self, username: Any) -> None:
        super().__init__(
            f"Utilisateur introuvable ou inactif: '{username}'.",
            code="USER_NOT_FOUND"
        )
        self.username = username
