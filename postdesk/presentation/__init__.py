"""
Presentation Layer - Interface utilisateur.

Cette couche contient les view models, les transformers et
l'API REST qui renvoie les view models comme corps de reponse.
"""

from postdesk.presentation.view_models.post_form_view_model import PostFormViewModel
from postdesk.presentation.view_models.post_index_view_model import PostIndexViewModel

__all__ = [
    "PostFormViewModel",
    "PostIndexViewModel",
]
