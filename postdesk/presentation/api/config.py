"""
Configuration API - Settings Pydantic.

Responsabilite unique:
----------------------
Charger et valider la configuration depuis les variables d'env
(ou un fichier .env).

Variables:
----------
- API_PREFIX: Prefixe des routes (defaut: /api/v1)
- LOG_JSON: Logs JSON (production)
- LOG_LEVEL: Niveau de log
- SEED_DEMO_DATA: Charger les donnees de demonstration
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """
    Configuration de l'API REST.

    Chargee depuis les variables d'environnement.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API
    api_title: str = "Postdesk API"
    api_version: str = "1.0.0"
    api_prefix: str = "/api/v1"

    # CORS
    cors_origins: list[str] = ["*"]

    # Logging
    log_json: bool = False
    log_level: str = "INFO"

    # Donnees
    seed_demo_data: bool = True


@lru_cache
def get_settings() -> APISettings:
    """Retourne la configuration (cached)."""
    return APISettings()
