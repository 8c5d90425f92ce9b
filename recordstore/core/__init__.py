from recordstore.core.records import (
    CatalogEntry,
    ClientEntry,
    ClientRegistry,
    ItemStore,
)
from recordstore.core.store import RecordStore, logger
from recordstore.core.utils import locked_method

__all__ = [
    "CatalogEntry",
    "ClientEntry",
    "ClientRegistry",
    "ItemStore",
    "RecordStore",
    "locked_method",
    "logger",
]
