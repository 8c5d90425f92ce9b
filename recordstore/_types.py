from typing import Protocol, TypeVar, runtime_checkable


@runtime_checkable
class Identifiable(Protocol):
    """Anything exposing a stable integer ``identifier``."""

    @property
    def identifier(self) -> int:  # pragma: no cover - interface
        ...


R = TypeVar("R", bound=Identifiable)

__all__ = ["Identifiable", "R"]
