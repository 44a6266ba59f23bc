"""Serialization: the record codec, its msgpack field layer and error types."""

from tagpack.serialization.errors import (
    CodecError,
    FieldCountMismatch,
    MalformedRecord,
    NotAnArrayHeader,
    UnknownTypeTag,
)
from tagpack.serialization.fields import FieldReader, FieldWriter
from tagpack.serialization.codec import RecordCodec

__all__ = [
    # Errors
    "CodecError",
    "NotAnArrayHeader",
    "UnknownTypeTag",
    "FieldCountMismatch",
    "MalformedRecord",
    # Fields
    "FieldWriter",
    "FieldReader",
    # Codec
    "RecordCodec",
]
