"""
Logging Config - Configuration structlog.

Rendu console en developpement, JSON en production (LOG_JSON=true).
Chaque requete HTTP porte un request_id et l'utilisateur annonce
(header X-Username), lies au contexte de tous les logs emis pendant
son traitement.

Usage:
------
    from postdesk.infrastructure.logging import configure_logging, get_logger

    configure_logging(json_logs=True)
    logger = get_logger(__name__)
    logger.info("post_saved", post_id=7)
"""

import logging
import sys
import time
from typing import Optional
from uuid import uuid4

import structlog

REQUEST_ID_HEADER = "X-Request-ID"


def configure_logging(
    json_logs: bool = False,
    log_level: str = "INFO",
) -> None:
    """
    Configure le logging global.

    Args:
        json_logs: True pour JSON (production), False pour la console.
        log_level: Niveau minimum (DEBUG, INFO, WARNING, ERROR).
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_logs:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper(), logging.INFO),
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Retourne un logger structure (un par module)."""
    return structlog.get_logger(name)


class RequestLogger:
    """
    Dispatch BaseHTTPMiddleware qui journalise chaque requete.

    Reprend le X-Request-ID du client ou en genere un, et le renvoie
    dans la reponse pour correler logs et appels.
    """

    def __init__(self, logger: Optional[structlog.stdlib.BoundLogger] = None):
        self._logger = logger or get_logger("postdesk.requests")

    async def __call__(self, request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        started = time.perf_counter()

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            username=request.headers.get("x-username", "-"),
            method=request.method,
            path=request.url.path,
        )

        try:
            response = await call_next(request)
        except Exception as e:
            self._logger.error(
                "request_failed",
                error_type=type(e).__name__,
                duration_ms=_elapsed_ms(started),
            )
            raise

        self._logger.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=_elapsed_ms(started),
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
