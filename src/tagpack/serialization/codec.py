"""Record codec: tagged records as length-prefixed msgpack arrays.

One record is written as::

    ArrayHeader(N)   N = record.field_count()
    UInt32(tag)
    <N - 1 fields, written by the record itself>

A container of records is an ordinary array whose elements are records.

Usage:
    codec = RecordCodec(TypeRegistry())
    data = codec.encode(SpriteRecord(kind=0, x=1.5, y=-2.25, angle=90.0))
    record = codec.decode(data)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from tagpack.core.record.models import TaggedRecord
from tagpack.core.types import UINT32_MAX, is_valid_tag
from tagpack.serialization.errors import FieldCountMismatch, MalformedRecord
from tagpack.serialization.fields import FieldReader, FieldWriter

if TYPE_CHECKING:
    from tagpack.core.registry import TypeRegistry

_logger = logging.getLogger(__name__)


class RecordCodec:
    """Encodes and decodes tagged records against a type registry.

    The codec uses the registry but does not own it; binding new variants on
    the registry makes them decodable without touching the codec.

    Args:
        registry: Registry resolving type tags to factories on decode.
    """

    def __init__(self, registry: TypeRegistry):
        """Initialize codec.

        Args:
            registry: Registry resolving type tags to factories on decode.
        """
        self._registry = registry

    @property
    def registry(self) -> TypeRegistry:
        return self._registry

    def pack_record(self, writer: FieldWriter, record: TaggedRecord) -> None:
        """Write one record: header, tag, then the record's own fields.

        Args:
            writer: Destination.
            record: Record to encode.

        Raises:
            ValueError: If the record's tag is 0 or outside uint32.
            FieldCountMismatch: If the record wrote a different number of fields
                than ``field_count() - 1``.
        """
        tag = record.tag
        if not is_valid_tag(tag):
            raise ValueError(
                f"{type(record).__name__} has tag {tag!r}; tags must be in 1..{UINT32_MAX}"
            )
        count = record.field_count()
        writer.write_array_header(count)
        writer.write_uint32(int(tag))

        start = writer.written
        record.write_fields(writer)
        written = writer.written - start
        if written != count - 1:
            raise FieldCountMismatch(int(tag), expected=count, actual=written + 1)

    def unpack_record(self, reader: FieldReader) -> TaggedRecord:
        """Read one record, constructing it through the registry.

        The declared array length is compared with the fresh instance's field
        count before any data field is read.

        Args:
            reader: Source positioned at a record's array header.

        Returns:
            The populated record.

        Raises:
            NotAnArrayHeader: If the next element is not an array.
            UnknownTypeTag: If the tag has no bound factory.
            FieldCountMismatch: If the declared length differs from the
                instance's field count.
            MalformedRecord: If a field cannot be decoded, or the record read a
                different number of fields than declared.
        """
        declared = reader.read_array_header()
        if declared < 1:
            raise MalformedRecord("Record array is empty; expected a type tag")
        tag = reader.read_uint32()

        factory = self._registry.resolve(tag)
        instance = factory()
        expected = instance.field_count()
        if expected != declared:
            raise FieldCountMismatch(tag, expected=expected, actual=declared)

        start = reader.consumed
        instance.read_fields(reader)
        read = reader.consumed - start
        if read != declared - 1:
            raise MalformedRecord(
                f"{type(instance).__name__} read {read} fields, declared {declared - 1}"
            )
        return instance

    def pack_records(self, writer: FieldWriter, records: Sequence[TaggedRecord]) -> None:
        """Write an array of records, preserving order."""
        writer.write_array_header(len(records))
        for record in records:
            self.pack_record(writer, record)

    def unpack_records(self, reader: FieldReader) -> list[TaggedRecord]:
        """Read an array of records, preserving order."""
        length = reader.read_array_header()
        return [self.unpack_record(reader) for _ in range(length)]

    def encode(self, record: TaggedRecord) -> bytes:
        """Encode a single record to bytes."""
        writer = FieldWriter()
        self.pack_record(writer, record)
        return writer.getvalue()

    def decode(self, data: bytes) -> TaggedRecord:
        """Decode exactly one record from bytes.

        Raises:
            MalformedRecord: If bytes remain after the record.
        """
        reader = FieldReader(data)
        record = self.unpack_record(reader)
        self._expect_end(reader)
        return record

    def encode_many(self, records: Sequence[TaggedRecord]) -> bytes:
        """Encode a sequence of records as one array."""
        writer = FieldWriter()
        self.pack_records(writer, records)
        data = writer.getvalue()
        _logger.debug("Encoded %d records into %d bytes", len(records), len(data))
        return data

    def decode_many(self, data: bytes) -> list[TaggedRecord]:
        """Decode exactly one array of records from bytes.

        Raises:
            MalformedRecord: If bytes remain after the array.
        """
        reader = FieldReader(data)
        records = self.unpack_records(reader)
        self._expect_end(reader)
        _logger.debug("Decoded %d records from %d bytes", len(records), len(data))
        return records

    @staticmethod
    def _expect_end(reader: FieldReader) -> None:
        if not reader.at_end():
            raise MalformedRecord(f"Trailing data after top-level value at byte {reader.position}")
