import functools
from typing import Any, Callable, cast

from recordstore._storage import MemoryStorage, StorageProtocol
from recordstore._types import R


def locked_method(method: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to lock method calls for thread safety."""

    @functools.wraps(method)
    def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper


def validate_log_level(log_level: int) -> int:
    if not (50 >= log_level >= 0):
        raise ValueError("log_level must be a valid logging level between 0 and 50")
    return log_level


def _make_default_store() -> StorageProtocol[R]:
    """Create a default StorageProtocol[R] instance.

    Localizes the cast from the concrete MemoryStorage to the generic protocol.
    """
    return cast(StorageProtocol[R], MemoryStorage())
