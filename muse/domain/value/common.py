"""Base classes for value objects."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel


class ValueObject(BaseModel):
    """Base class for structured value objects such as token claims.

    Value objects are immutable and compared by value, not identity.
    Fields may be populated by name or by their wire alias.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
    )


T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Base class for value objects that wrap a single primitive value.

    The wrapped value is available as ``.root`` and ``model_dump()`` returns
    the primitive, so ``Email("a@x.com")`` serializes as a plain string.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
