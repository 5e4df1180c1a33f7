"""
Entite User - Utilisateur du back office.

Represente l'acteur courant d'une requete. Il est injecte
explicitement dans les view models, jamais lu depuis un etat global.

Attributes:
-----------
- id: Identifiant unique UUID
- username: Nom d'utilisateur unique
- email: Adresse email
- role: Role et permissions (admin, editor, viewer)
- is_active: Compte actif ou desactive
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from postdesk.domain.value_objects.role import Role


@dataclass
class User:
    """
    Utilisateur du back office.

    Attributes:
        id: Identifiant unique UUID.
        username: Nom d'utilisateur (unique).
        email: Adresse email.
        role: Role avec permissions.
        is_active: True si le compte est actif.
        created_at: Date de creation du compte.

    Example:
        >>> user = User.create("john", "john@example.com", role="editor")
        >>> user.can("posts_edit")
        True
    """

    id: UUID
    username: str
    email: str
    role: Role
    is_active: bool = True
    created_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def create(cls, username: str, email: str, role: str = "viewer") -> "User":
        """
        Factory pour creer un nouvel utilisateur.

        Args:
            username: Nom d'utilisateur (unique).
            email: Adresse email.
            role: Nom du role (admin, editor, viewer).

        Returns:
            Nouvelle instance User.
        """
        return cls(
            id=uuid4(),
            username=username.strip().lower(),
            email=email.strip().lower(),
            role=Role.from_string(role),
        )

    def deactivate(self) -> None:
        """Desactive le compte."""
        self.is_active = False

    # Delegations vers Role
    def can(self, permission: str) -> bool:
        """Verifie une permission."""
        return self.role.can(permission)

    @property
    def is_admin(self) -> bool:
        """True si administrateur."""
        return self.role.is_admin

    @property
    def display_name(self) -> str:
        """Nom affichable (username capitalise)."""
        return self.username.capitalize()

    def __eq__(self, other: object) -> bool:
        """Compare par ID."""
        if isinstance(other, User):
            return self.id == other.id
        return False

    def __hash__(self) -> int:
        """Hash base sur l'ID."""
        return hash(self.id)
