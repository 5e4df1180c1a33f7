"""
MemoryUserRepository - Implementation en memoire du UserRepository.
"""

from threading import Lock
from uuid import UUID

from postdesk.application.ports.repositories.user_repository import UserRepository
from postdesk.domain.entities.user import User


class MemoryUserRepository(UserRepository):
    """UserRepository en memoire, indexe par ID."""

    def __init__(self, users: list[User] | None = None) -> None:
        self._users: dict[UUID, User] = {}
        self._lock = Lock()

        for user in users or []:
            self.save(user)

    def save(self, user: User) -> User:
        with self._lock:
            self._users[user.id] = user
        return user

    def get_by_id(self, user_id: UUID) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def get_by_username(self, username: str) -> User | None:
        wanted = username.strip().lower()
        with self._lock:
            for user in self._users.values():
                if user.username == wanted:
                    return user
        return None
