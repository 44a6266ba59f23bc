"""Fixed-width field I/O on top of msgpack.

FieldWriter and FieldReader implement the FieldSink/FieldSource protocols that
records see, plus array headers for the codec. The reader inspects each
element's marker byte before decoding it, so a float64 where a float32 belongs,
or a string where an int32 belongs, is rejected instead of silently coerced.
"""

from __future__ import annotations

import struct
from typing import cast

import msgpack
from msgpack.exceptions import OutOfData

from tagpack.core.types import UINT32_MAX
from tagpack.serialization.errors import MalformedRecord, NotAnArrayHeader

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_FLOAT32 = 0xCA
_ARRAY16 = 0xDC
_ARRAY32 = 0xDD
# uint8..uint64, int8..int64
_SIZED_INTS = frozenset(range(0xCC, 0xD4))


def _is_array_marker(marker: int) -> bool:
    return 0x90 <= marker <= 0x9F or marker in (_ARRAY16, _ARRAY32)


def _is_int_marker(marker: int) -> bool:
    # positive fixint, negative fixint, sized ints
    return marker <= 0x7F or marker >= 0xE0 or marker in _SIZED_INTS


def _check_int(value: object, kind: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{kind} field requires an int, got {type(value).__name__}")
    return int(value)


class FieldWriter:
    """Buffering msgpack writer for record fields.

    Integers use msgpack's compact encodings; floats always use the 4-byte
    float32 form. ``written`` counts every element written (headers included).
    """

    def __init__(self) -> None:
        """Initialize an empty writer."""
        self._packer = msgpack.Packer(use_single_float=True, autoreset=False)
        self.written = 0

    def write_array_header(self, length: int) -> None:
        """Write an array header declaring ``length`` following elements.

        Raises:
            ValueError: If length does not fit in uint32.
        """
        length = _check_int(length, "array length")
        if not 0 <= length <= UINT32_MAX:
            raise ValueError(f"Array length {length} out of uint32 range")
        self._packer.pack_array_header(length)
        self.written += 1

    def write_uint32(self, value: int) -> None:
        """Write an unsigned 32-bit integer.

        Raises:
            TypeError: If value is not an int (bools included).
            ValueError: If value is outside ``0..UINT32_MAX``.
        """
        value = _check_int(value, "uint32")
        if not 0 <= value <= UINT32_MAX:
            raise ValueError(f"{value} out of uint32 range")
        self._packer.pack(value)
        self.written += 1

    def write_int32(self, value: int) -> None:
        """Write a signed 32-bit integer.

        Raises:
            TypeError: If value is not an int (bools included).
            ValueError: If value is outside the int32 range.
        """
        value = _check_int(value, "int32")
        if not INT32_MIN <= value <= INT32_MAX:
            raise ValueError(f"{value} out of int32 range")
        self._packer.pack(value)
        self.written += 1

    def write_float32(self, value: float) -> None:
        """Write an IEEE-754 single-precision float.

        Raises:
            TypeError: If value is not a real number.
            ValueError: If a finite value overflows float32.
        """
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise TypeError(f"float32 field requires a float, got {type(value).__name__}")
        value = float(value)
        try:
            struct.pack(">f", value)
        except OverflowError:
            raise ValueError(f"{value} overflows float32") from None
        self._packer.pack(value)
        self.written += 1

    def getvalue(self) -> bytes:
        """Return everything written so far."""
        return self._packer.bytes()


class FieldReader:
    """Strict msgpack reader over a complete in-memory message.

    ``consumed`` counts every element read (headers included). All failures
    raise NotAnArrayHeader or MalformedRecord; msgpack's own exceptions never
    leak.

    Args:
        data: The complete encoded message.
    """

    def __init__(self, data: bytes) -> None:
        """Initialize reader over data.

        Args:
            data: The complete encoded message.
        """
        self._data = bytes(data)
        # buffer holds the whole message, whatever its size
        self._unpacker = msgpack.Unpacker(raw=False, max_buffer_size=max(len(self._data), 1))
        self._unpacker.feed(self._data)
        self.consumed = 0

    @property
    def position(self) -> int:
        """Offset of the next unread byte."""
        return self._unpacker.tell()

    def at_end(self) -> bool:
        """Check if every input byte has been consumed."""
        return self.position >= len(self._data)

    def _peek(self, expected: str) -> int:
        pos = self.position
        if pos >= len(self._data):
            raise MalformedRecord(f"Stream exhausted at byte {pos}, expected {expected}")
        return self._data[pos]

    def _unpack(self, expected: str) -> object:
        pos = self.position
        try:
            value = self._unpacker.unpack()
        except OutOfData:
            raise MalformedRecord(f"Truncated {expected} at byte {pos}") from None
        self.consumed += 1
        return value

    def _read_int(self, expected: str, low: int, high: int) -> int:
        marker = self._peek(expected)
        if not _is_int_marker(marker):
            raise MalformedRecord(
                f"Expected {expected} at byte {self.position}, found marker 0x{marker:02x}"
            )
        value = cast(int, self._unpack(expected))
        if not low <= value <= high:
            raise MalformedRecord(f"{value} out of {expected} range")
        return value

    def read_array_header(self) -> int:
        """Read an array header and return its declared element count.

        Raises:
            NotAnArrayHeader: If the next element is not an array.
            MalformedRecord: If the stream is exhausted or the header truncated.
        """
        marker = self._peek("array header")
        if not _is_array_marker(marker):
            raise NotAnArrayHeader(marker)
        pos = self.position
        try:
            length = self._unpacker.read_array_header()
        except OutOfData:
            raise MalformedRecord(f"Truncated array header at byte {pos}") from None
        self.consumed += 1
        return length

    def read_uint32(self) -> int:
        """Read an unsigned 32-bit integer."""
        return self._read_int("uint32", 0, UINT32_MAX)

    def read_int32(self) -> int:
        """Read a signed 32-bit integer."""
        return self._read_int("int32", INT32_MIN, INT32_MAX)

    def read_float32(self) -> float:
        """Read an IEEE-754 single-precision float."""
        marker = self._peek("float32")
        if marker != _FLOAT32:
            raise MalformedRecord(
                f"Expected float32 at byte {self.position}, found marker 0x{marker:02x}"
            )
        return cast(float, self._unpack("float32"))
