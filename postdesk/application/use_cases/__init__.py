"""
Use Cases - Cas d'utilisation de l'application.

Chaque use case orchestre une operation d'ecriture. Apres une
mutation, la couche presentation reconstruit un view model frais
plutot que de rediriger.
"""

from postdesk.application.use_cases.delete_post import (
    DeletePostRequest,
    DeletePostUseCase,
)
from postdesk.application.use_cases.save_post import (
    SavePostRequest,
    SavePostResponse,
    SavePostUseCase,
)

__all__ = [
    "DeletePostRequest",
    "DeletePostUseCase",
    "SavePostRequest",
    "SavePostResponse",
    "SavePostUseCase",
]
