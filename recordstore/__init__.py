"""recordstore — small generic, thread-safe record store.

The package exposes `RecordStore`, an insertion-ordered container of records
looked up by their integer ``identifier``, two concrete stores, and the clone
and comparison capabilities used by the bundled demo.
"""
from pathlib import Path
from typing import Optional

from importlib.metadata import PackageNotFoundError, version as _pkg_version

from recordstore._storage import MemoryStorage, StorageProtocol
from recordstore._types import Identifiable
from recordstore.cloning import Dot, Quadrilateral, Replicable, clone_object
from recordstore.comparison import (
    Comparer,
    ComplexNumber,
    ModulusComparer,
    Ratio,
    RatioComparer,
)
from recordstore.core import (
    CatalogEntry,
    ClientEntry,
    ClientRegistry,
    ItemStore,
    RecordStore,
)
from recordstore.exceptions import InvalidArgumentError, RecordNotFoundError


def _read_version_file() -> Optional[str]:
    try:
        return Path(__file__).with_name("VERSION").read_text(encoding="utf8").strip()
    except OSError:
        return None


def _get_version() -> str:
    # 1) Try to read installed distribution metadata
    try:
        return _pkg_version("recordstore")
    except PackageNotFoundError:
        pass

    # 2) Try a VERSION file written at build time
    v = _read_version_file()
    if v:
        return v

    # 3) Fall back to a safe default
    return "0.0.0"


__version__ = _get_version()


__all__ = [
    "CatalogEntry",
    "ClientEntry",
    "ClientRegistry",
    "Comparer",
    "ComplexNumber",
    "Dot",
    "Identifiable",
    "InvalidArgumentError",
    "ItemStore",
    "MemoryStorage",
    "ModulusComparer",
    "Quadrilateral",
    "Ratio",
    "RatioComparer",
    "RecordNotFoundError",
    "RecordStore",
    "Replicable",
    "StorageProtocol",
    "clone_object",
    "__version__",
]
