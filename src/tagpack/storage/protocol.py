"""Storage protocol for swappable persistence backends.

Usage:
    store = FileStore(RecordCodec(TypeRegistry()))
    store.save(path, save_data)
    save_data = store.load(path, default=SaveData())
"""

from __future__ import annotations

from os import PathLike
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tagpack.world.save_data import SaveData

type StrPath = str | PathLike[str]


@runtime_checkable
class RecordStore(Protocol):
    """Abstract persistence interface for a SaveData container."""

    def save(self, path: StrPath, value: SaveData) -> None:
        """Persist value at path, replacing whatever was there."""
        ...

    def load(self, path: StrPath, default: SaveData) -> SaveData:
        """Load the value at path, or return default if nothing was saved."""
        ...
