"""
Application Layer - Orchestration des Use Cases.

Cette couche contient:
    - ports/: Interfaces (abstractions) pour les adapters
    - use_cases/: Cas d'utilisation de l'application

Principes:
    - Depend uniquement du domaine
    - Definit les interfaces (ports) que les adapters implementent
"""

__all__ = []
