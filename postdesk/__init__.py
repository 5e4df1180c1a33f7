"""
Postdesk - Back office d'articles en architecture hexagonale.

Couches:
    - domain: Entites et regles metier
    - application: Ports et use cases
    - infrastructure: Adapters, logging, container
    - presentation: View models, transformers, API REST
"""

__version__ = "1.0.0"
