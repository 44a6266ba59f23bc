"""Configuration settings using Pydantic Settings.

Usage:
    from tagpack.config import PersistSettings

    # Load from environment variables (TAGPACK_*)
    settings = PersistSettings()
    path = settings.persist_path

    # Or override with explicit values
    settings = PersistSettings(data_dir="/tmp/saves", file_name="slot1.dat")
"""

from __future__ import annotations

from pathlib import Path

from platformdirs import PlatformDirs
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_SLUG = "tagpack"


def default_data_dir() -> Path:
    """OS-appropriate user data directory for save files, via platformdirs."""
    return Path(PlatformDirs(appname=APP_SLUG, appauthor=False).user_data_dir)


class PersistSettings(BaseSettings):  # type: ignore[misc]
    """Where the save file lives.

    Attributes:
        data_dir: Directory holding the save file (None for the OS default).
        file_name: Save file name inside data_dir.

    Environment Variables:
        TAGPACK_DATA_DIR
        TAGPACK_FILE_NAME
    """

    model_config = SettingsConfigDict(
        env_prefix="TAGPACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_dir: Path | None = None
    file_name: str = "data.dat"

    @property
    def persist_path(self) -> Path:
        """Full path of the save file."""
        return (self.data_dir or default_data_dir()) / self.file_name
