"""Comparison capability: three-way comparers for small value types."""
import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Protocol, TypeVar

from recordstore.exceptions import InvalidArgumentError

T = TypeVar("T", contravariant=True)


class Comparer(Protocol[T]):
    def assess(self, x: T, y: T) -> int:  # pragma: no cover - interface
        """Return -1, 0 or 1 as ``x`` is less than, equal to or greater than ``y``."""
        ...


def _three_way(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


@dataclass(frozen=True)
class ComplexNumber:
    real: float
    imaginary: float

    @property
    def modulus(self) -> float:
        return math.hypot(self.real, self.imaginary)


@dataclass(frozen=True)
class Ratio:
    """An exact ratio of two integers.

    Raises:
        InvalidArgumentError: If denominator is zero.
    """

    numerator: int
    denominator: int

    def __post_init__(self) -> None:
        if self.denominator == 0:
            raise InvalidArgumentError("Denominator cannot be zero.")

    @property
    def value(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)


class ModulusComparer:
    """Orders complex numbers by magnitude."""

    def assess(self, x: ComplexNumber, y: ComplexNumber) -> int:
        return _three_way(x.modulus, y.modulus)


class RatioComparer:
    def assess(self, x: Ratio, y: Ratio) -> int:
        return _three_way(x.value, y.value)


__all__ = [
    "Comparer",
    "ComplexNumber",
    "ModulusComparer",
    "Ratio",
    "RatioComparer",
]
