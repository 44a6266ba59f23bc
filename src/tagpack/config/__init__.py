"""Configuration module using Pydantic Settings.

Usage:
    from tagpack.config import PersistSettings

    settings = PersistSettings(file_name="slot1.dat")
"""

from tagpack.config.settings import PersistSettings, default_data_dir

__all__ = [
    "PersistSettings",
    "default_data_dir",
]
