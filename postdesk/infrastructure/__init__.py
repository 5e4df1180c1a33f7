"""
Infrastructure Layer - Adapters techniques.

Contient:
    - adapters/: Implementations en memoire des repositories
    - logging/: Configuration structlog
    - container.py: Fabrique explicite des composants et view models
"""
