"""
Exceptions de la couche view model.

Trois familles d'erreurs, distinctes pour l'appelant:
    - UnresolvedName: nom demande hors de la liste des accesseurs exposes
    - SerializationError: valeur d'accesseur non encodable en JSON
    - ViewModelDefinitionError: classe de view model mal declaree

Les erreurs levees par un accesseur lui-meme ne sont jamais
enveloppees: elles remontent telles quelles.
"""

from typing import Any


class ViewModelError(Exception):
    """Exception de base pour les erreurs de view model."""

    def __init__(self, message: str, code: str | None = None) -> None:
        """
        Initialise l'exception.

        Args:
            message: Message d'erreur descriptif.
            code: Code d'erreur pour identification programmatique.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class UnresolvedName(ViewModelError):
    """
    Leve quand un nom ne correspond a aucun accesseur expose.

    N'herite pas de LookupError: un `getattr(..., default)` ou un
    moteur de template ne peut pas la convertir en valeur vide.
    """

    def __init__(self, name: Any, view_model: str) -> None:
        super().__init__(
            f"Propriete '{name}' non exposee par {view_model}.",
            code="UNRESOLVED_NAME"
        )
        self.name = name
        self.view_model = view_model


class SerializationError(ViewModelError):
    """Leve quand une valeur ne peut pas etre encodee en JSON."""

    def __init__(self, value: Any, reason: str) -> None:
        super().__init__(
            f"Valeur de type {type(value).__name__} non serialisable: {reason}",
            code="SERIALIZATION_ERROR"
        )
        self.value_type = type(value)
        self.reason = reason


class ViewModelDefinitionError(ViewModelError):
    """Leve quand la declaration d'une classe de view model est incoherente."""

    def __init__(self, view_model: str, reason: str) -> None:
        super().__init__(
            f"View model {view_model} invalide: {reason}",
            code="INVALID_VIEW_MODEL"
        )
        self.view_model = view_model
        self.reason = reason
