"""
Configuration et fixtures pytest.
"""

import sys
from pathlib import Path

import pytest

# Ajouter le repertoire racine au path
sys.path.insert(0, str(Path(__file__).parent.parent))

from postdesk.domain.entities.category import Category
from postdesk.domain.entities.post import Post
from postdesk.domain.entities.user import User
from postdesk.domain.value_objects.role import RoleLevel
from postdesk.infrastructure.adapters.memory_category_repository import (
    MemoryCategoryRepository,
)
from postdesk.infrastructure.adapters.memory_post_repository import MemoryPostRepository

# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - UTILISATEURS
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def admin() -> User:
    """Administrateur."""
    return User.create("admin", "admin@example.com", role="admin")


@pytest.fixture
def editor() -> User:
    """Redacteur."""
    return User.create("editor", "editor@example.com", role="editor")


@pytest.fixture
def viewer() -> User:
    """Lecteur."""
    return User.create("viewer", "viewer@example.com", role="viewer")


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - ENTITES
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def existing_post() -> Post:
    """Article deja persiste."""
    return Post(id=7, title="Hi", body="there")


@pytest.fixture
def categories() -> list[Category]:
    """Rubriques A et B ouvertes a tous, C reservee aux admins."""
    return [
        Category(id=2, name="B", position=2),
        Category(id=1, name="A", position=1),
        Category(
            id=3,
            name="C",
            allowed_roles=frozenset({RoleLevel.ADMIN}),
            position=3,
        ),
    ]


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - REPOSITORIES
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def category_repository(categories: list[Category]) -> MemoryCategoryRepository:
    """Repository des rubriques en memoire."""
    return MemoryCategoryRepository(categories)


@pytest.fixture
def post_repository() -> MemoryPostRepository:
    """Repository des articles avec deux articles (IDs 1 et 2)."""
    return MemoryPostRepository([
        Post.create("Premier", "Contenu du premier article."),
        Post.create("Second", "Contenu du second article."),
    ])
