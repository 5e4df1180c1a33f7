"""
Dependencies - Injection de dependances FastAPI.

Responsabilite unique:
----------------------
Fournir le conteneur et l'acteur courant aux endpoints.

Usage:
------
    @router.get("/posts")
    def list_posts(user: User = Depends(get_current_user)):
        ...
"""

from typing import Optional

from fastapi import Depends, Header, HTTPException, status

from postdesk.domain.entities.user import User
from postdesk.domain.exceptions import UserNotFoundError
from postdesk.infrastructure.container import Container, get_container
from postdesk.presentation.api.config import APISettings, get_settings


def get_app_container(
    settings: APISettings = Depends(get_settings),
) -> Container:
    """Retourne le conteneur global."""
    return get_container(seed_demo_data=settings.seed_demo_data)


def get_current_user(
    x_username: Optional[str] = Header(default=None),
    container: Container = Depends(get_app_container),
) -> User:
    """
    Retourne l'utilisateur courant depuis le header X-Username.

    Raises:
        HTTPException 401 si absent, inconnu ou inactif.
    """
    if not x_username:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Header X-Username manquant",
        )

    try:
        return container.current_user(x_username)
    except UserNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Utilisateur inactif ou inexistant",
        )
