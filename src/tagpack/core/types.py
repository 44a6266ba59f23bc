"""Core type definitions for tagpack."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tagpack.core.record.models import TaggedRecord

UINT32_MAX = 0xFFFF_FFFF


class TypeTag(IntEnum):
    """Wire discriminator for the built-in record shapes.

    Extension records may use any other integer in the uint32 range; ``0`` is
    reserved and never written.
    """

    UNKNOWN = 0
    SPRITE = 1
    BRUSH = 2


type RecordFactory = Callable[[], TaggedRecord]
"""Zero-argument callable producing an empty record of one concrete type."""


def is_valid_tag(tag: int) -> bool:
    """Check that a tag may appear on the wire.

    Args:
        tag: Candidate type tag.

    Returns:
        True if tag is a non-bool int in ``1..UINT32_MAX``.
    """
    return isinstance(tag, int) and not isinstance(tag, bool) and 0 < tag <= UINT32_MAX
