"""
Ports (Interfaces) de l'application.

Les ports definissent les contrats que les adapters
de l'infrastructure doivent implementer.
"""

from postdesk.application.ports.repositories import (
    CategoryRepository,
    PostRepository,
    UserRepository,
)

__all__ = [
    "CategoryRepository",
    "PostRepository",
    "UserRepository",
]
