"""Save session: restore the host at startup, persist it at shutdown.

Usage:
    session = SaveSession(FileStore(RecordCodec(TypeRegistry())), host)
    session.load()    # on startup
    ...
    session.save()    # on quit
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from tagpack.storage.protocol import RecordStore, StrPath
from tagpack.world.save_data import EntityHost, SaveData

_logger = logging.getLogger(__name__)


def _settings_path() -> Path:
    # Late import so hosts passing their own resolver never read settings.
    from tagpack.config import PersistSettings

    return PersistSettings().persist_path


class SaveSession:
    """Ties a host to a record store and a save file location.

    Args:
        store: Persistence backend.
        host: Application side providing and receiving records.
        path_resolver: Returns the save file path. Defaults to
            ``PersistSettings().persist_path``.
    """

    def __init__(
        self,
        store: RecordStore,
        host: EntityHost,
        path_resolver: Callable[[], StrPath] | None = None,
    ):
        """Initialize session.

        Args:
            store: Persistence backend.
            host: Application side providing and receiving records.
            path_resolver: Returns the save file path.
        """
        self._store = store
        self._host = host
        self._resolve_path = path_resolver or _settings_path

    @property
    def path(self) -> StrPath:
        """Resolved save file path."""
        return self._resolve_path()

    def load(self) -> int:
        """Restore every saved entity into the host. A missing file restores none.

        Returns:
            Number of entities restored.
        """
        path = self.path
        _logger.info("Start load game data from %s", path)
        data = self._store.load(path, SaveData())
        count = data.restore(self._host)
        _logger.info("End load game data: %d entities restored", count)
        return count

    def save(self) -> int:
        """Gather every live entity from the host and persist them.

        Returns:
            Number of entities saved.
        """
        path = self.path
        _logger.info("Start save game data to %s", path)
        data = SaveData()
        count = data.store(self._host)
        self._store.save(path, data)
        _logger.info("End save game data: %d entities saved", count)
        return count
