"""
View Models - Modeles de vue pour la presentation.

Les View Models recoivent leurs dependances a la construction et
exposent des donnees de presentation via des accesseurs, lisibles
par appel direct, par nom (`vm["post-title"]`) ou en bloc
(`to_dict`, `to_payload`, `to_response`).
"""

from postdesk.presentation.view_models.accessors import accessor_names, is_accessor
from postdesk.presentation.view_models.base import ViewModel
from postdesk.presentation.view_models.exceptions import (
    SerializationError,
    UnresolvedName,
    ViewModelDefinitionError,
    ViewModelError,
)
from postdesk.presentation.view_models.naming import (
    KeyStyle,
    external_name,
    normalize_name,
    resolve,
)
from postdesk.presentation.view_models.post_form_view_model import PostFormViewModel
from postdesk.presentation.view_models.post_index_view_model import PostIndexViewModel
from postdesk.presentation.view_models.serialization import represent, to_jsonable

__all__ = [
    "ViewModel",
    "PostFormViewModel",
    "PostIndexViewModel",
    "KeyStyle",
    "accessor_names",
    "is_accessor",
    "normalize_name",
    "external_name",
    "resolve",
    "represent",
    "to_jsonable",
    "ViewModelError",
    "UnresolvedName",
    "SerializationError",
    "ViewModelDefinitionError",
]
