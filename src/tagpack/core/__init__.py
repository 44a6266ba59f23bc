"""Core functionalities: type tags, the record protocol, variants and registry.

Architecture Note:
    core/ holds the data shapes and the tag table. Byte-level encoding lives in
    serialization/, file handling in storage/.
"""

from tagpack.core.record import (
    BrushRecord,
    FieldSink,
    FieldSource,
    SpriteKind,
    SpriteRecord,
    TaggedRecord,
)
from tagpack.core.registry import TypeRegistry
from tagpack.core.types import UINT32_MAX, RecordFactory, TypeTag, is_valid_tag

__all__ = [
    # Types
    "TypeTag",
    "RecordFactory",
    "UINT32_MAX",
    "is_valid_tag",
    # Record
    "TaggedRecord",
    "FieldSink",
    "FieldSource",
    "SpriteRecord",
    "SpriteKind",
    "BrushRecord",
    # Registry
    "TypeRegistry",
]
