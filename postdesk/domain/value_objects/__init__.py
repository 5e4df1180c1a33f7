"""
Value Objects du domaine.

Objets immutables compares par valeur.
"""

from postdesk.domain.value_objects.role import ROLE_PERMISSIONS, Role, RoleLevel

__all__ = [
    "Role",
    "RoleLevel",
    "ROLE_PERMISSIONS",
]
