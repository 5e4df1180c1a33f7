"""
Resolution de noms - Nom externe vers nom canonique d'accesseur.

Responsabilite unique:
----------------------
Traduire un nom demande par un template ou un client JSON
(`post-title`, `postTitle`, `PostTitle`, `post_title`, `post title`)
vers le nom canonique de l'accesseur (`post_title`), puis le valider
contre la liste des accesseurs exposes.

Pipeline:
---------
    normalize_name -> index du type -> nom canonique | UnresolvedName

La normalisation ne depend que de la chaine: un meme nom externe
donne toujours le meme accesseur pour un type donne.
"""

import re
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Mapping

from postdesk.infrastructure.logging import get_logger
from postdesk.presentation.view_models.accessors import (
    accessor_names,
    view_model_type,
)
from postdesk.presentation.view_models.exceptions import (
    UnresolvedName,
    ViewModelDefinitionError,
)

logger = get_logger(__name__)

# postTitle -> post_Title, HTTPStatus -> HTTP_Status, item2Count -> item2_Count
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_SEPARATORS = re.compile(r"[\s._-]+")


class KeyStyle(str, Enum):
    """Convention des cles dans le mapping a plat d'un view model."""

    SNAKE = "snake"
    CAMEL = "camel"
    KEBAB = "kebab"


def normalize_name(name: str) -> str:
    """
    Normalise un nom externe en snake_case.

    Args:
        name: Nom dans une convention quelconque.

    Returns:
        Mots en minuscules joints par "_" (chaine vide si aucun mot).

    Example:
        >>> normalize_name("postTitle")
        'post_title'
        >>> normalize_name("post-title")
        'post_title'
    """
    spaced = _CAMEL_BOUNDARY.sub("_", name)
    return "_".join(word.lower() for word in _SEPARATORS.split(spaced) if word)


def external_name(canonical: str, style: KeyStyle = KeyStyle.SNAKE) -> str:
    """
    Rend le nom d'un accesseur dans une convention donnee.

    Le resultat se normalise toujours vers normalize_name(canonical).

    Example:
        >>> external_name("can_create", KeyStyle.CAMEL)
        'canCreate'
    """
    key = normalize_name(canonical)
    words = key.split("_")
    style = KeyStyle(style)

    if style is KeyStyle.KEBAB:
        return "-".join(words)
    if style is KeyStyle.CAMEL:
        head, *tail = words
        camel = head + "".join(word.capitalize() for word in tail)
        # item_2d ou a_b_c n'ont pas de forme camelCase sans ambiguite
        if normalize_name(camel) == key:
            return camel
    return key


def resolve(view_model: Any, name: Any) -> str:
    """
    Resout un nom externe vers le nom canonique de l'accesseur.

    Args:
        view_model: Instance ou classe de ViewModel.
        name: Nom externe demande.

    Returns:
        Nom canonique d'un accesseur expose.

    Raises:
        UnresolvedName: Si le nom ne correspond a aucun accesseur expose.
        ViewModelDefinitionError: Si deux accesseurs se normalisent pareil.
    """
    klass = view_model_type(view_model)
    canonical = None
    if isinstance(name, str):
        canonical = _name_index(klass).get(normalize_name(name))

    if canonical is None:
        logger.debug("view_model_name_unresolved", view_model=klass.__name__, name=name)
        raise UnresolvedName(name, klass.__name__)

    return canonical


def exposed_names(view_model: Any) -> dict[str, str]:
    """
    Mapping nom externe -> nom canonique pour tous les accesseurs exposes.

    Les noms externes suivent le `key_style` de la classe.
    """
    klass = view_model_type(view_model)
    style = getattr(klass, "key_style", KeyStyle.SNAKE)
    return {external_name(accessor, style): accessor for accessor in _name_index(klass).values()}


@lru_cache(maxsize=None)
def _name_index(klass: type) -> Mapping[str, str]:
    index: dict[str, str] = {}
    for accessor in accessor_names(klass):
        key = normalize_name(accessor)
        if key in index:
            raise ViewModelDefinitionError(
                klass.__name__,
                f"'{index[key]}' et '{accessor}' se resolvent vers le meme nom '{key}'",
            )
        index[key] = accessor
    return MappingProxyType(index)
