"""Record functionality: the tagged-record protocol and built-in variants."""

from tagpack.core.record.models import FieldSink, FieldSource, TaggedRecord
from tagpack.core.record.variants import BrushRecord, SpriteKind, SpriteRecord

__all__ = [
    # Models
    "TaggedRecord",
    "FieldSink",
    "FieldSource",
    # Variants
    "SpriteRecord",
    "SpriteKind",
    "BrushRecord",
]
