"""Record models: the tagged-record capability and the field I/O it talks to.

A record never touches msgpack directly. It writes and reads its data fields
through a FieldSink/FieldSource, and the codec owns the array header and the
type tag slot.

Usage:
    @dataclass(slots=True)
    class Score:
        TAG: ClassVar[int] = 100
        points: int = 0

        @property
        def tag(self) -> int:
            return self.TAG

        def field_count(self) -> int:
            return 2

        def write_fields(self, sink: FieldSink) -> None:
            sink.write_int32(self.points)

        def read_fields(self, source: FieldSource) -> None:
            self.points = source.read_int32()
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FieldSink(Protocol):
    """Fixed-width primitive writer handed to ``TaggedRecord.write_fields``."""

    def write_uint32(self, value: int) -> None: ...

    def write_int32(self, value: int) -> None: ...

    def write_float32(self, value: float) -> None: ...


@runtime_checkable
class FieldSource(Protocol):
    """Fixed-width primitive reader handed to ``TaggedRecord.read_fields``.

    Every read raises MalformedRecord if the stream is exhausted or the next
    element is not encoded at the requested width.
    """

    def read_uint32(self) -> int: ...

    def read_int32(self) -> int: ...

    def read_float32(self) -> float: ...


@runtime_checkable
class TaggedRecord(Protocol):
    """Anything the codec can persist: a type tag plus ordered fields.

    Invariant: ``field_count()`` equals 1 (the tag slot) plus the number of
    primitives written by ``write_fields`` and read by ``read_fields``.
    """

    @property
    def tag(self) -> int:
        """Type tag identifying the concrete record shape."""
        ...

    def field_count(self) -> int:
        """Total number of wire elements, tag slot included."""
        ...

    def write_fields(self, sink: FieldSink) -> None:
        """Write data fields in declared order. Must not write the tag."""
        ...

    def read_fields(self, source: FieldSource) -> None:
        """Read data fields in declared order and assign them to self."""
        ...
