"""
MemoryCategoryRepository - Implementation en memoire du CategoryRepository.
"""

from threading import Lock

from postdesk.application.ports.repositories.category_repository import (
    CategoryRepository,
)
from postdesk.domain.entities.category import Category
from postdesk.domain.entities.user import User


class MemoryCategoryRepository(CategoryRepository):
    """CategoryRepository en memoire, trie par position puis par ID."""

    def __init__(self, categories: list[Category] | None = None) -> None:
        self._categories = list(categories or [])
        self._lock = Lock()

    def add(self, category: Category) -> None:
        """Ajoute une rubrique."""
        with self._lock:
            self._categories.append(category)

    def find_all(self) -> list[Category]:
        with self._lock:
            return sorted(self._categories, key=lambda c: (c.position, c.id))

    def find_for_user(self, user: User) -> list[Category]:
        return [c for c in self.find_all() if c.is_available_to(user)]
