"""Host-facing glue: the persisted container and the save session."""

from tagpack.world.save_data import EntityHost, SaveData
from tagpack.world.session import SaveSession

__all__ = [
    "EntityHost",
    "SaveData",
    "SaveSession",
]
