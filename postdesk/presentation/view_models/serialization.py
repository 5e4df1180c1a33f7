"""
Strategie de serialisation - Representation filaire des valeurs d'accesseur.

Regle:
------
- Une chaine (str ou sous-classe, hors membre d'Enum) est rendue telle quelle.
- Tout le reste (dict, list, nombres, booleens, None, dataclasses,
  modeles Pydantic, datetime, UUID, Enum) est encode en JSON compact.

L'encodage passe par l'encodeur Pydantic, qui connait les modeles
et les types usuels. Une valeur non encodable (fichier, objet
arbitraire, structure cyclique) leve SerializationError.

Les flux et iterateurs (fichiers, StringIO, generateurs) sont refuses
avant l'encodage, a toute profondeur: l'encodeur les lirait comme des
listes, et une seconde lecture donnerait une liste vide.
"""

import dataclasses
import io
from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, TypeAdapter

from postdesk.presentation.view_models.exceptions import SerializationError

_ANY_ADAPTER: TypeAdapter[Any] = TypeAdapter(Any)

_SCALARS = (str, bytes, int, float, bool, Enum)


def represent(value: Any) -> str:
    """
    Representation texte d'une valeur d'accesseur.

    Args:
        value: Valeur brute retournee par l'accesseur.

    Returns:
        La chaine elle-meme, ou son encodage JSON.

    Raises:
        SerializationError: Si la valeur n'est pas encodable.

    Example:
        >>> represent("Hi")
        'Hi'
        >>> represent({"id": None, "title": ""})
        '{"id":null,"title":""}'
    """
    if isinstance(value, str) and not isinstance(value, Enum):
        return value

    _reject_streams(value)
    try:
        return _ANY_ADAPTER.dump_json(value).decode("utf-8")
    except (ValueError, TypeError) as exc:
        raise SerializationError(value, str(exc)) from exc


def to_jsonable(value: Any) -> Any:
    """
    Convertit recursivement une valeur en types JSON natifs.

    Args:
        value: Valeur brute (mapping a plat d'un view model en general).

    Returns:
        Structure de dict/list/str/int/float/bool/None.

    Raises:
        SerializationError: Si la valeur n'est pas encodable.
    """
    _reject_streams(value)
    try:
        return _ANY_ADAPTER.dump_python(value, mode="json")
    except (ValueError, TypeError) as exc:
        raise SerializationError(value, str(exc)) from exc


def _reject_streams(value: Any, seen: set[int] | None = None) -> None:
    if value is None or isinstance(value, _SCALARS):
        return
    if isinstance(value, (io.IOBase, Iterator)):
        raise SerializationError(value, "flux ou iterateur non rejouable")

    seen = set() if seen is None else seen
    # Les cycles sont laisses a l'encodeur, qui les refuse
    if id(value) in seen:
        return
    seen.add(id(value))

    for child in _children(value):
        _reject_streams(child, seen)


def _children(value: Any) -> list[Any]:
    if isinstance(value, Mapping):
        return [*value.keys(), *value.values()]
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    if isinstance(value, BaseModel):
        return list(value.__dict__.values())
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return [getattr(value, field.name) for field in dataclasses.fields(value)]
    return []
