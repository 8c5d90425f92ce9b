import contextlib
import logging
from threading import RLock
from typing import ContextManager, Generic, Iterator, List, Optional

from recordstore._storage import StorageProtocol
from recordstore._types import R
from recordstore.core.utils import (
    _make_default_store,
    locked_method,
    validate_log_level,
)
from recordstore.exceptions import InvalidArgumentError, RecordNotFoundError

logger = logging.getLogger(__name__)


class RecordStore(Generic[R]):
    """
    Thread-safe, insertion-ordered store of records keyed by ``identifier``.

    Lookups are linear scans and identifiers are not required to be unique:
    duplicates are kept, and point lookups return the first match.

    Raises:
        InvalidArgumentError: If attempting to insert ``None``.
        RecordNotFoundError: If indexing the store by an identifier it does not hold.

    Examples:
        >>> from recordstore import CatalogEntry
        >>> store = RecordStore[CatalogEntry]()
        >>> store.insert(CatalogEntry(1, "Friend", 1))
        >>> store.find_by_id(1).name
        'Friend'
        >>> store.find_by_id(99) is None
        True
    """

    def __init__(
        self,
        *,
        lock: Optional[RLock] = None,
        log_level: int = logging.WARNING,
        store: Optional[StorageProtocol[R]] = None,
    ) -> None:
        """
        Initialize the RecordStore.

        Args:
            lock: An optional threading.RLock or similar object for thread safety.
            log_level: Logging level for the store logger.
            store: An optional storage backend implementing StorageProtocol.

        Raises:
            TypeError: If the lock lacks context manager methods, or the
                backend does not implement StorageProtocol.
            ValueError: If log_level is not a valid logging level.
        """
        if lock is not None and not all(
            hasattr(lock, method)
            for method in ("__enter__", "__exit__", "acquire", "release")
        ):
            raise TypeError("lock must be a threading.RLock or similar object")

        if store is not None and not isinstance(store, StorageProtocol):
            raise TypeError(
                f"store must implement StorageProtocol, got {type(store).__name__}"
            )

        self._lock: RLock = lock or RLock()
        self._store: StorageProtocol[R] = (
            store if store is not None else _make_default_store()
        )
        logger.setLevel(validate_log_level(log_level))

    @locked_method
    def insert(self, record: R) -> None:
        """
        Append a record to the end of the store.

        Raises:
            InvalidArgumentError: If record is None.
            AttributeError: If record has no identifier. The store is left as is.
        """
        if record is None:
            raise InvalidArgumentError("record cannot be None")
        identifier = record.identifier
        self._store.append(record)
        logger.debug("Inserted %s %r", type(record).__name__, identifier)

    @locked_method
    def remove(self, record: R) -> bool:
        """
        Remove the first stored record equal to ``record``.

        Removing a record that is not stored is a no-op. Returns whether a
        record was removed.
        """
        removed = self._store.remove(record)
        if removed:
            logger.debug("Removed %r", record)
        else:
            logger.debug("Nothing to remove for %r", record)
        return removed

    @locked_method
    def find_by_id(self, identifier: int) -> Optional[R]:
        """Return the first record with the given identifier, or None."""
        return self._find(identifier)

    @locked_method
    def all(self) -> List[R]:
        """Return a snapshot of every record in insertion order."""
        return self._store.items()

    @locked_method
    def clear(self) -> None:
        self._store.clear()
        logger.debug("Store cleared")

    def bulk(self) -> ContextManager["RecordStore[R]"]:
        """
        Context manager holding the store lock for a batch of operations.
        Store methods called inside the block take the lock again, so this
        needs a reentrant lock such as the default RLock.

        Usage:
            with store.bulk() as s:
                s.insert(a)
                s.remove(b)
        """

        @contextlib.contextmanager
        def _bulk_ctx() -> Iterator[RecordStore[R]]:
            self._lock.acquire()
            try:
                yield self
            finally:
                self._lock.release()

        return _bulk_ctx()

    def _find(self, identifier: object) -> Optional[R]:
        # callers hold the lock; it may be a non-reentrant Lock
        return self._store.find(lambda r: r.identifier == identifier)

    @locked_method
    def __getitem__(self, identifier: int) -> R:
        record = self._find(identifier)
        if record is None:
            raise RecordNotFoundError(f"No record with identifier {identifier!r}")
        return record

    @locked_method
    def __contains__(self, identifier: object) -> bool:
        return self._find(identifier) is not None

    @locked_method
    def __iter__(self) -> Iterator[R]:
        return iter(self._store.items())

    @locked_method
    def __len__(self) -> int:
        return len(self._store)

    @locked_method
    def __repr__(self) -> str:
        ids = [r.identifier for r in self._store.items()]
        return f"{self.__class__.__name__}({ids!r})"
