"""Decode and layout errors raised by the record codec.

None of these are recovered internally; they surface to whoever called the
codec or the file store.
"""

from __future__ import annotations


class CodecError(Exception):
    """Base class for every record codec failure."""

    pass


class NotAnArrayHeader(CodecError):
    """Raised when a record position does not start with an array header."""

    def __init__(self, marker: int | None = None) -> None:
        self.marker = marker
        if marker is None:
            super().__init__("Expected array header")
        else:
            super().__init__(f"Expected array header, found marker 0x{marker:02x}")


class UnknownTypeTag(CodecError, LookupError):
    """Raised when a type tag has no factory bound in the registry."""

    def __init__(self, tag: int) -> None:
        self.tag = tag
        super().__init__(f"{tag} is not a bound type tag")


class FieldCountMismatch(CodecError):
    """Raised when a record's declared field count disagrees with the wire.

    On decode this fires before any data field is read, so no half-populated
    record escapes. On encode it means a variant wrote a different number of
    fields than it declares.
    """

    def __init__(self, tag: int, expected: int, actual: int) -> None:
        self.tag = tag
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Field count mismatch for type tag {tag}: expected {expected}, got {actual}"
        )


class MalformedRecord(CodecError):
    """Raised when a field cannot be decoded at its expected width or type."""

    pass
