#!/usr/bin/env python3
"""
Point d'entree principal pour lancer l'API Postdesk.

Usage:
------
    python3 run.py
    # ou directement:
    uvicorn postdesk.presentation.api.main:app --reload

Variables d'environnement:
--------------------------
- HOST / PORT: Adresse d'ecoute (defaut: 127.0.0.1:8000)
- LOG_JSON, LOG_LEVEL, SEED_DEMO_DATA: voir APISettings
"""
import os

import uvicorn


def main():
    """Lance l'API avec uvicorn."""
    uvicorn.run(
        "postdesk.presentation.api.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    main()
