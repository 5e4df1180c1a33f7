"""
Adapters en memoire.

Implementations des repositories pour le developpement et les tests.
Partagees entre requetes, elles protegent leur etat par un Lock.
"""

from postdesk.infrastructure.adapters.memory_category_repository import (
    MemoryCategoryRepository,
)
from postdesk.infrastructure.adapters.memory_post_repository import MemoryPostRepository
from postdesk.infrastructure.adapters.memory_user_repository import MemoryUserRepository

__all__ = [
    "MemoryCategoryRepository",
    "MemoryPostRepository",
    "MemoryUserRepository",
]
