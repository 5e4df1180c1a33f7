"""
Entites du domaine.

Entites principales:
    - User: Acteur courant avec son role
    - Post: Article (brouillon tant qu'il n'a pas d'identifiant)
    - Category: Rubrique ouverte a certains roles
"""

from postdesk.domain.entities.category import Category
from postdesk.domain.entities.post import Post
from postdesk.domain.entities.user import User

__all__ = [
    "Category",
    "Post",
    "User",
]
