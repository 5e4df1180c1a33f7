"""
Transformers - Entite du domaine vers forme de transfert stable.

Un accesseur de view model peut deleguer le calcul de sa valeur a un
transformer. La sortie doit rester serialisable en JSON.
"""

from postdesk.presentation.transformers.base import Transformer
from postdesk.presentation.transformers.post_transformer import (
    PostResource,
    PostTransformer,
)

__all__ = [
    "PostResource",
    "PostTransformer",
    "Transformer",
]
