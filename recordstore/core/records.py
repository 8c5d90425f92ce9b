from decimal import Decimal, InvalidOperation
from typing import Any, Union

from recordstore.core.store import RecordStore
from recordstore.exceptions import InvalidArgumentError

PriceLike = Union[Decimal, int, float, str]


def _to_decimal(value: PriceLike) -> Decimal:
    """Convert a price to Decimal.

    Floats go through str(), so they keep their printed form: 2.5 becomes
    Decimal("2.5") and 1e20 becomes Decimal("1E+20").

    Raises:
        InvalidArgumentError: If value is not a number.
    """
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        raise InvalidArgumentError(f"price must be numeric, got {value!r}") from e


class CatalogEntry:
    """A priced catalog entry. ``name`` and ``price`` may change, the id may not."""

    __slots__ = ("_identifier", "name", "_price")

    def __init__(self, identifier: int, name: str, price: PriceLike) -> None:
        self._identifier = identifier
        self.name = name
        self.price = price

    @property
    def identifier(self) -> int:
        return self._identifier

    @property
    def price(self) -> Decimal:
        return self._price

    @price.setter
    def price(self, value: PriceLike) -> None:
        self._price = _to_decimal(value)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CatalogEntry):
            return NotImplemented
        return (self._identifier, self.name, self._price) == (
            other._identifier,
            other.name,
            other._price,
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"{self._identifier!r}, {self.name!r}, {self._price!r})"
        )


class ClientEntry:
    """A client with a postal address."""

    __slots__ = ("_identifier", "name", "address")

    def __init__(self, identifier: int, name: str, address: str) -> None:
        self._identifier = identifier
        self.name = name
        self.address = address

    @property
    def identifier(self) -> int:
        return self._identifier

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ClientEntry):
            return NotImplemented
        return (self._identifier, self.name, self.address) == (
            other._identifier,
            other.name,
            other.address,
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"{self._identifier!r}, {self.name!r}, {self.address!r})"
        )


class ItemStore(RecordStore[CatalogEntry]):
    """Store of catalog entries."""


class ClientRegistry(RecordStore[ClientEntry]):
    """Store of client entries."""
