"""Storage backends."""

from tagpack.storage.file import FileStore
from tagpack.storage.protocol import RecordStore, StrPath

__all__ = [
    "RecordStore",
    "FileStore",
    "StrPath",
]
