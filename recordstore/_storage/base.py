from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterator, List, Optional

from recordstore._types import R


class AbstractStorage(ABC, Generic[R]):
    """Abstract base class for storage implementations."""

    @abstractmethod
    def append(self, record: R) -> None:
        pass

    @abstractmethod
    def remove(self, record: R) -> bool:
        pass

    @abstractmethod
    def find(self, predicate: Callable[[R], bool]) -> Optional[R]:
        pass

    @abstractmethod
    def items(self) -> List[R]:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def __iter__(self) -> Iterator[R]:
        return iter(self.items())
