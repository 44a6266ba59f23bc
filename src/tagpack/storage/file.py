"""File-backed record store.

The file holds one encoded container and nothing else: no magic number,
header or version field. Each save fully overwrites it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from tagpack.serialization.codec import RecordCodec
from tagpack.storage.protocol import StrPath
from tagpack.world.save_data import SaveData

_logger = logging.getLogger(__name__)


class FileStore:
    """Saves and loads SaveData containers through a RecordCodec.

    Calls are synchronous and blocking. Concurrent save/load on the same path is
    not supported; callers serialize such access themselves.

    Args:
        codec: Codec used to encode and decode the container.
    """

    def __init__(self, codec: RecordCodec):
        """Initialize file store.

        Args:
            codec: Codec used to encode and decode the container.
        """
        self._codec = codec

    @property
    def codec(self) -> RecordCodec:
        return self._codec

    def save(self, path: StrPath, value: SaveData) -> None:
        """Encode value and write it to path, creating or truncating the file.

        The container is encoded before the file is opened, so an encoding
        failure leaves any existing file untouched. I/O errors propagate
        unchanged.

        Args:
            path: Target file.
            value: Container to persist.
        """
        data = self._codec.encode_many(value.records)
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "wb") as fh:
            fh.write(data)
            fh.flush()
        _logger.debug("Saved %d records (%d bytes) to %s", len(value.records), len(data), target)

    def load(self, path: StrPath, default: SaveData) -> SaveData:
        """Read and decode the container at path.

        Args:
            path: Source file.
            default: Returned unchanged when no file exists at path.

        Returns:
            The decoded container, or default.

        Raises:
            CodecError: If the file content does not decode.
        """
        source = Path(path)
        if not source.exists():
            _logger.debug("No save file at %s; using default", source)
            return default

        with open(source, "rb") as fh:
            data = fh.read()
        records = self._codec.decode_many(data)
        _logger.debug("Loaded %d records (%d bytes) from %s", len(records), len(data), source)
        return SaveData(records=records)
