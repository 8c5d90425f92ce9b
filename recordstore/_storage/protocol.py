from typing import (
    Callable,
    Iterator,
    List,
    Optional,
    Protocol,
    runtime_checkable,
)

from recordstore._types import R


@runtime_checkable
class StorageProtocol(Protocol[R]):
    """Minimal protocol describing the storage interface expected by RecordStore.

    Only the methods that `recordstore.core.RecordStore` calls are listed so
    any ordered container can be plugged in as a backend.
    """

    def append(self, record: R) -> None:  # pragma: no cover - interface
        ...

    def remove(self, record: R) -> bool:  # pragma: no cover - interface
        ...

    def find(
        self, predicate: Callable[[R], bool]
    ) -> Optional[R]:  # pragma: no cover - interface
        ...

    def items(self) -> List[R]:  # pragma: no cover - interface
        ...

    def clear(self) -> None:  # pragma: no cover - interface
        ...

    def __len__(self) -> int:  # pragma: no cover - interface
        ...

    def __iter__(self) -> Iterator[R]:  # pragma: no cover - interface
        ...
