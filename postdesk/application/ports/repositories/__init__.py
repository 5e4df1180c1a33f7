"""
Interfaces des repositories (persistance).

Ces interfaces definissent les operations de persistance
que les adapters doivent implementer.
"""

from postdesk.application.ports.repositories.category_repository import CategoryRepository
from postdesk.application.ports.repositories.post_repository import PostRepository
from postdesk.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "CategoryRepository",
    "PostRepository",
    "UserRepository",
]
