"""
Entite Category - Rubrique dans laquelle un article peut etre publie.
"""

from dataclasses import dataclass, field

from postdesk.domain.entities.user import User
from postdesk.domain.value_objects.role import RoleLevel


@dataclass
class Category:
    """
    Rubrique du back office.

    Attributes:
        id: Identifiant de la rubrique.
        name: Nom affiche.
        allowed_roles: Roles autorises a publier (vide = tout le monde).
        position: Ordre d'affichage.
    """

    id: int
    name: str
    allowed_roles: frozenset[RoleLevel] = field(default_factory=frozenset)
    position: int = 0

    def is_available_to(self, user: User) -> bool:
        """
        Indique si un utilisateur peut publier dans cette rubrique.

        Args:
            user: Utilisateur courant.

        Returns:
            True si la rubrique est ouverte a son role.
        """
        if not self.allowed_roles:
            return True
        return user.role.level in self.allowed_roles
