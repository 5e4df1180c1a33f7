"""
ViewModel - Classe de base des view models.

Un view model recoit toutes ses dependances a la construction
(acteur courant, entite editee, repositories) et expose des valeurs
de presentation via des accesseurs: methodes publiques sans argument.

Trois facons de lire un view model, une seule source de verite:
---------------------------------------------------------------
- Appel direct: `vm.post()` retourne la valeur brute.
- Acces dynamique: `vm["post-title"]` resout le nom, appelle
  l'accesseur et retourne du texte (chaine telle quelle, sinon JSON).
- Conversion: `vm.to_dict()` (valeurs brutes), `vm.to_payload()`
  (JSON natif) et `vm.to_response()` (reponse HTTP).

Example:
    >>> class GreetingViewModel(ViewModel):
    ...     def __init__(self, user: User) -> None:
    ...         self._user = user
    ...
    ...     def greeting(self) -> str:
    ...         return f"Bonjour {self._user.display_name}"
    ...
    >>> vm = GreetingViewModel(user)
    >>> vm["greeting"]
    'Bonjour John'
"""

from typing import Any, ClassVar, Mapping

from fastapi.responses import JSONResponse

from postdesk.infrastructure.logging import get_logger
from postdesk.presentation.view_models.accessors import accessor_names
from postdesk.presentation.view_models.exceptions import UnresolvedName
from postdesk.presentation.view_models.naming import KeyStyle, exposed_names, resolve
from postdesk.presentation.view_models.serialization import represent, to_jsonable

logger = get_logger(__name__)


class ViewModel:
    """
    Base des view models.

    Attributes de classe:
        exposed: Liste explicite des accesseurs exposes (remplace la
            liste par defaut, sans fusion).
        ignored: Accesseurs retires de la liste par defaut.
        key_style: Convention des cles de to_dict / to_payload.
    """

    exposed: ClassVar[tuple[str, ...] | None] = None
    ignored: ClassVar[tuple[str, ...]] = ()
    key_style: ClassVar[KeyStyle] = KeyStyle.SNAKE

    # __getitem__ prend des noms, pas des index
    __iter__ = None

    def __getitem__(self, name: str) -> str:
        """
        Acces dynamique a une propriete par son nom externe.

        Raises:
            UnresolvedName: Si le nom n'est pas expose.
            SerializationError: Si la valeur n'est pas encodable.
        """
        accessor = resolve(self, name)
        value = self._call(accessor)
        logger.debug(
            "view_model_property_resolved",
            view_model=type(self).__name__,
            name=name,
            accessor=accessor,
        )
        return represent(value)

    def __contains__(self, name: object) -> bool:
        """True si le nom se resout vers un accesseur expose."""
        try:
            resolve(self, name)
        except UnresolvedName:
            return False
        return True

    def get_raw(self, name: str) -> Any:
        """
        Comme `vm[name]` mais sans serialisation.

        Raises:
            UnresolvedName: Si le nom n'est pas expose.
        """
        return self._call(resolve(self, name))

    def to_dict(self) -> dict[str, Any]:
        """
        Mapping a plat nom externe -> valeur brute.

        Utilise pour destructurer le view model dans un contexte de rendu.
        """
        return {
            external: self._call(accessor)
            for external, accessor in exposed_names(self).items()
        }

    def to_payload(self) -> dict[str, Any]:
        """
        Mapping a plat serialise recursivement en types JSON natifs.

        Raises:
            SerializationError: Si une valeur n'est pas encodable.
        """
        return to_jsonable(self.to_dict())

    def to_response(
        self,
        status_code: int = 200,
        headers: Mapping[str, str] | None = None,
    ) -> JSONResponse:
        """
        Reponse HTTP dont le corps est `to_payload()`.

        Permet de renvoyer des donnees fraiches apres une ecriture
        plutot qu'une redirection.
        """
        return JSONResponse(
            content=self.to_payload(),
            status_code=status_code,
            headers=dict(headers) if headers else None,
        )

    def _call(self, accessor: str) -> Any:
        # Lookup sur la classe: un attribut d'instance ne masque pas l'accesseur
        return getattr(type(self), accessor)(self)

    def __repr__(self) -> str:
        names = ", ".join(accessor_names(self))
        return f"<{type(self).__name__} [{names}]>"
