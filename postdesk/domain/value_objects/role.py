"""
Value Object Role - Roles utilisateur et permissions.

Definit les niveaux d'acces du back office avec leurs permissions.

Roles disponibles:
------------------
- admin: Acces complet, gestion des categories
- editor: Redaction et modification des articles
- viewer: Consultation seule

Note:
-----
Les permissions servent a la presentation (afficher ou non un bouton),
elles ne remplacent pas un controle d'acces.
"""

from dataclasses import dataclass
from enum import Enum


class RoleLevel(Enum):
    """Niveaux de role utilisateur."""

    ADMIN = "admin"
    EDITOR = "editor"
    VIEWER = "viewer"

    def __str__(self) -> str:
        return self.value


# Matrice des permissions par role
ROLE_PERMISSIONS: dict[RoleLevel, set[str]] = {
    RoleLevel.ADMIN: {
        "posts_view",
        "posts_create",
        "posts_edit",
        "posts_delete",
        "categories_manage",
    },
    RoleLevel.EDITOR: {
        "posts_view",
        "posts_create",
        "posts_edit",
    },
    RoleLevel.VIEWER: {
        "posts_view",
    },
}


@dataclass(frozen=True)
class Role:
    """
    Role utilisateur avec ses permissions.

    Attributes:
        level: Niveau du role (admin, editor, viewer).

    Example:
        >>> Role.editor().can("posts_edit")
        True
        >>> Role.viewer().can("posts_edit")
        False
    """

    level: RoleLevel

    @classmethod
    def admin(cls) -> "Role":
        """Cree un role administrateur."""
        return cls(level=RoleLevel.ADMIN)

    @classmethod
    def editor(cls) -> "Role":
        """Cree un role redacteur."""
        return cls(level=RoleLevel.EDITOR)

    @classmethod
    def viewer(cls) -> "Role":
        """Cree un role lecteur."""
        return cls(level=RoleLevel.VIEWER)

    @classmethod
    def from_string(cls, role_str: str) -> "Role":
        """
        Cree un Role depuis une chaine.

        Args:
            role_str: Nom du role (admin, editor, viewer).

        Returns:
            Instance de Role correspondante.

        Raises:
            ValueError: Si le role est inconnu.
        """
        try:
            level = RoleLevel(role_str.lower().strip())
            return cls(level=level)
        except ValueError:
            raise ValueError(f"Role inconnu: {role_str}")

    @property
    def name(self) -> str:
        """Nom technique du role."""
        return self.level.value

    @property
    def permissions(self) -> set[str]:
        """Retourne l'ensemble des permissions du role."""
        return ROLE_PERMISSIONS.get(self.level, set())

    def can(self, permission: str) -> bool:
        """Verifie si le role a une permission."""
        return permission in self.permissions

    @property
    def is_admin(self) -> bool:
        """True si role administrateur."""
        return self.level == RoleLevel.ADMIN

    def __str__(self) -> str:
        return self.level.value
