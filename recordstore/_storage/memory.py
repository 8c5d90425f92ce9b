from typing import Callable, Generic, List, Optional

from recordstore._storage.base import AbstractStorage
from recordstore._types import R


class MemoryStorage(AbstractStorage[R], Generic[R]):
    """A simple in-memory storage implementation using a list.

    Records keep their insertion order. Lookups are linear scans.
    """

    def __init__(self) -> None:
        self._records: List[R] = []

    def append(self, record: R) -> None:
        self._records.append(record)

    def remove(self, record: R) -> bool:
        try:
            self._records.remove(record)
        except ValueError:
            return False
        return True

    def find(self, predicate: Callable[[R], bool]) -> Optional[R]:
        return next((r for r in self._records if predicate(r)), None)

    def items(self) -> List[R]:
        return list(self._records)

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)
