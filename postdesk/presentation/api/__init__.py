"""
API REST - FastAPI.

Les endpoints renvoient directement les view models
(`to_response`) comme corps de reponse.

Usage:
------
    uvicorn postdesk.presentation.api.main:app --reload
"""

from postdesk.presentation.api.main import create_app

__all__ = ["create_app"]
