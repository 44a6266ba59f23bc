"""Persisted container and the host hooks it is filled from and drained into."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from tagpack.core.record.models import TaggedRecord


@runtime_checkable
class EntityHost(Protocol):
    """Host application side of a save: where records come from and go to."""

    def gather_entities(self) -> Iterable[TaggedRecord]:
        """Snapshot every live entity as a record, in a stable order."""
        ...

    def restore_entity(self, record: TaggedRecord) -> None:
        """Recreate one entity from its record."""
        ...


@dataclass(slots=True)
class SaveData:
    """Ordered records written to and read from one save file.

    Not tagged itself: on the wire it is a plain array of records.
    """

    records: list[TaggedRecord] = field(default_factory=list)

    def store(self, host: EntityHost) -> int:
        """Replace the held records with a fresh snapshot of the host.

        Returns:
            Number of records gathered.
        """
        self.records = list(host.gather_entities())
        return len(self.records)

    def restore(self, host: EntityHost) -> int:
        """Hand every record back to the host in order, then drop them.

        Records are kept if the host raises partway through.

        Returns:
            Number of records restored.
        """
        for record in self.records:
            host.restore_entity(record)
        count = len(self.records)
        self.records = []
        return count

    def __len__(self) -> int:
        return len(self.records)
