"""Base classes for domain entities and value objects."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel


class DomainModel(BaseModel):
    """Base class for all domain entities.

    Entities are immutable snapshots; changes produce new instances via
    ``model_copy(update=...)`` or come back from the repository.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


class ValueObject(BaseModel):
    """Immutable object compared by value, not identity."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Value object wrapping a single primitive.

    The wrapped value is accessed via ``.root`` and ``model_dump()``
    returns the primitive itself.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
