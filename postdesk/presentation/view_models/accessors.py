"""
Registre des accesseurs - Liste des operations exposees par un view model.

Responsabilite unique:
----------------------
Determiner, par introspection de la classe, quelles methodes d'un
view model sont des accesseurs. Aucun accesseur n'est execute.

Un accesseur est:
-----------------
- une fonction declaree sur une sous-classe de ViewModel (ou un mixin),
- dont le nom ne commence pas par "_",
- qui n'est pas un membre reserve de ViewModel (to_dict, to_payload...),
- appelable sans argument (tous les parametres apres self ont un defaut).

Les proprietes, staticmethod et classmethod ne sont pas des accesseurs.
Une methode decoree (functools.lru_cache, functools.wraps) est jugee
sur la fonction d'origine (inspect.unwrap).

Surcharges de classe:
---------------------
- exposed: tuple de noms, remplace entierement la liste par defaut
- ignored: tuple de noms retires de la liste par defaut

Usage:
------
    >>> accessor_names(PostFormViewModel)
    ('post', 'categories', 'form_action', 'form_method')
"""

import inspect
from functools import lru_cache
from typing import Any

from postdesk.presentation.view_models.exceptions import ViewModelDefinitionError

_SELF_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)
_VARIADIC_KINDS = (
    inspect.Parameter.VAR_POSITIONAL,
    inspect.Parameter.VAR_KEYWORD,
)


def view_model_type(view_model: Any) -> type:
    """
    Retourne la classe d'un view model (instance ou classe).

    Raises:
        TypeError: Si l'objet n'est pas un ViewModel.
    """
    # Import tardif pour eviter les dependances circulaires
    from postdesk.presentation.view_models.base import ViewModel

    klass = view_model if isinstance(view_model, type) else type(view_model)
    if not issubclass(klass, ViewModel):
        raise TypeError(f"{klass.__name__} n'est pas un ViewModel")
    return klass


def accessor_names(view_model: Any) -> tuple[str, ...]:
    """
    Liste des accesseurs exposes, dans l'ordre de declaration.

    Args:
        view_model: Instance ou classe de ViewModel.

    Returns:
        Noms canoniques des accesseurs (tuple eventuellement vide).

    Raises:
        ViewModelDefinitionError: Si exposed/ignored sont incoherents.
    """
    return _accessors_for_type(view_model_type(view_model))


def is_accessor(view_model: Any, name: str) -> bool:
    """True si `name` est un accesseur expose (nom canonique exact)."""
    return name in accessor_names(view_model)


@lru_cache(maxsize=None)
def _accessors_for_type(klass: type) -> tuple[str, ...]:
    from postdesk.presentation.view_models.base import ViewModel

    reserved = frozenset(vars(ViewModel))
    declared = _declared_accessors(klass, ViewModel, reserved)

    exposed = getattr(klass, "exposed", None)
    ignored = getattr(klass, "ignored", ()) or ()

    if exposed is not None and ignored:
        raise ViewModelDefinitionError(
            klass.__name__, "'exposed' et 'ignored' ne peuvent pas etre combines"
        )

    if exposed is not None:
        _check_names(klass, "exposed", exposed, declared)
        return tuple(dict.fromkeys(exposed))

    _check_names(klass, "ignored", ignored, declared)
    return tuple(name for name in declared if name not in ignored)


def _declared_accessors(
    klass: type,
    base: type,
    reserved: frozenset[str],
) -> list[str]:
    names: list[str] = []
    for owner in reversed(klass.__mro__):
        if owner in base.__mro__:
            continue
        for name, member in vars(owner).items():
            if name not in names and _as_function(member) is not None:
                names.append(name)

    return [name for name in names if _is_accessor(klass, name, reserved)]


def _is_accessor(klass: type, name: str, reserved: frozenset[str]) -> bool:
    if name.startswith("_") or name in reserved:
        return False
    # Resolution finale: une sous-classe peut masquer la methode
    function = _as_function(inspect.getattr_static(klass, name))
    if function is None:
        return False
    return _callable_without_arguments(function)


def _as_function(member: Any) -> Any:
    # staticmethod et classmethod exposent aussi __wrapped__
    if isinstance(member, (staticmethod, classmethod, property)):
        return None
    # @lru_cache et autres decorateurs objets: fonction d'origine
    function = inspect.unwrap(member) if callable(member) else member
    return function if inspect.isfunction(function) else None


def _callable_without_arguments(function: Any) -> bool:
    try:
        parameters = list(inspect.signature(function).parameters.values())
    except (TypeError, ValueError):
        return False

    if not parameters or parameters[0].kind not in _SELF_KINDS:
        return False

    return all(
        param.default is not inspect.Parameter.empty or param.kind in _VARIADIC_KINDS
        for param in parameters[1:]
    )


def _check_names(
    klass: type,
    attribute: str,
    names: Any,
    declared: list[str],
) -> None:
    if isinstance(names, str):
        raise ViewModelDefinitionError(
            klass.__name__, f"'{attribute}' doit etre une sequence de noms"
        )
    unknown = [name for name in names if name not in declared]
    if unknown:
        raise ViewModelDefinitionError(
            klass.__name__,
            f"'{attribute}' cite des noms qui ne sont pas des accesseurs: "
            f"{', '.join(map(str, unknown))}",
        )
