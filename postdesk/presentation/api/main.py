"""
Main - Factory FastAPI.

Responsabilite unique:
----------------------
Creer et configurer l'application FastAPI.

Usage:
------
    # Development
    uvicorn postdesk.presentation.api.main:app --reload

    # Production
    LOG_JSON=true uvicorn postdesk.presentation.api.main:app --host 0.0.0.0
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from postdesk.infrastructure.logging import RequestLogger, configure_logging, get_logger
from postdesk.presentation.api.config import APISettings, get_settings
from postdesk.presentation.api.posts.router import router as posts_router


def create_app(settings: APISettings | None = None) -> FastAPI:
    """
    Factory pour creer l'application FastAPI.

    Args:
        settings: Configuration (defaut: variables d'environnement).

    Returns:
        Application FastAPI configuree.
    """
    settings = settings or get_settings()

    configure_logging(json_logs=settings.log_json, log_level=settings.log_level)
    logger = get_logger("api")

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Request logging middleware
    app.add_middleware(BaseHTTPMiddleware, dispatch=RequestLogger())

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    logger.info("app_started", version=settings.api_version)

    # Health check
    @app.get("/health", tags=["Health"])
    def health():
        """Endpoint de sante."""
        return {"status": "healthy"}

    # Routers
    app.include_router(posts_router, prefix=settings.api_prefix)

    return app


# Instance pour uvicorn
app = create_app()
