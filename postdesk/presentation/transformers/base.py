"""
Interface Transformer.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, TypeVar

EntityT = TypeVar("EntityT")
ResourceT = TypeVar("ResourceT")


class Transformer(ABC, Generic[EntityT, ResourceT]):
    """
    Transforme une entite en ressource de transfert.

    Les sous-classes implementent `transform`; `collection`
    applique la transformation a une sequence.
    """

    @abstractmethod
    def transform(self, entity: EntityT) -> ResourceT:
        """Transforme une entite."""
        pass

    def collection(self, entities: Iterable[EntityT]) -> list[ResourceT]:
        """Transforme une sequence d'entites, en conservant l'ordre."""
        return [self.transform(entity) for entity in entities]
