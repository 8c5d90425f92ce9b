"""Clone capability: types that can produce an independent copy of themselves."""
from dataclasses import dataclass
from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T", bound="Replicable")


@runtime_checkable
class Replicable(Protocol):
    def replicate(self: T) -> T:  # pragma: no cover - interface
        ...


@dataclass
class Dot:
    x: int
    y: int

    @classmethod
    def copy_of(cls, other: "Dot") -> "Dot":
        return cls(other.x, other.y)

    def replicate(self) -> "Dot":
        return Dot.copy_of(self)


@dataclass
class Quadrilateral:
    """Axis-aligned quadrilateral given by two corners.

    ``replicate`` copies the corners too, so the copy shares no ``Dot`` with
    the original.
    """

    upper_left: Dot
    lower_right: Dot

    @classmethod
    def copy_of(cls, other: "Quadrilateral") -> "Quadrilateral":
        return cls(Dot.copy_of(other.upper_left), Dot.copy_of(other.lower_right))

    def replicate(self) -> "Quadrilateral":
        return Quadrilateral.copy_of(self)


def clone_object(original: T) -> T:
    """
    Return ``original.replicate()``.

    Raises:
        TypeError: If original does not provide ``replicate``.
    """
    if not isinstance(original, Replicable):
        raise TypeError(f"{type(original).__name__} cannot be replicated")
    return original.replicate()


__all__ = ["Replicable", "Dot", "Quadrilateral", "clone_object"]
