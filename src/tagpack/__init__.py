"""tagpack: tagged-record persistence over MessagePack.

Usage:
    from tagpack import FileStore, RecordCodec, SaveData, SpriteRecord, TypeRegistry

    registry = TypeRegistry()            # built-in variants bound
    registry.bind(100, Score.zero)       # extensions bound before first decode
    store = FileStore(RecordCodec(registry))

    store.save("data.dat", SaveData([SpriteRecord(kind=0, x=1.5, y=-2.25, angle=90.0)]))
    data = store.load("data.dat", default=SaveData())
"""

__version__ = "0.1.0"

# Core primitives
from tagpack.core import (
    UINT32_MAX,
    BrushRecord,
    FieldSink,
    FieldSource,
    RecordFactory,
    SpriteKind,
    SpriteRecord,
    TaggedRecord,
    TypeRegistry,
    TypeTag,
)

# Serialization
from tagpack.serialization import (
    CodecError,
    FieldCountMismatch,
    FieldReader,
    FieldWriter,
    MalformedRecord,
    NotAnArrayHeader,
    RecordCodec,
    UnknownTypeTag,
)

# Storage
from tagpack.storage import (
    FileStore,
    RecordStore,
)

# Host glue
from tagpack.world import (
    EntityHost,
    SaveData,
    SaveSession,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "TypeTag",
    "RecordFactory",
    "UINT32_MAX",
    "TaggedRecord",
    "FieldSink",
    "FieldSource",
    "SpriteRecord",
    "SpriteKind",
    "BrushRecord",
    "TypeRegistry",
    # Serialization
    "RecordCodec",
    "FieldWriter",
    "FieldReader",
    "CodecError",
    "NotAnArrayHeader",
    "UnknownTypeTag",
    "FieldCountMismatch",
    "MalformedRecord",
    # Storage
    "RecordStore",
    "FileStore",
    # Host glue
    "EntityHost",
    "SaveData",
    "SaveSession",
]
