"""Built-in record variants.

SpriteRecord captures one sprite placed on the canvas; BrushRecord captures the
painter's running rotation so new sprites keep turning where they left off.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from tagpack.core.record.models import FieldSink, FieldSource
from tagpack.core.types import TypeTag


class SpriteKind(IntEnum):
    """Sprite prefab selector stored in ``SpriteRecord.kind``."""

    CHICK = 0
    FESTIVAL_CHICK = 1


@dataclass(slots=True)
class SpriteRecord:
    """Position, rotation and prefab kind of one sprite.

    Wire layout: ``[1, kind:int32, x:float32, y:float32, angle:float32]``.

    Attributes:
        kind: Prefab kind, see SpriteKind. Kept as a plain int so unknown kinds
            survive a round trip.
        x: World-space x coordinate.
        y: World-space y coordinate.
        angle: Rotation around the view axis, in degrees.
    """

    TAG: ClassVar[TypeTag] = TypeTag.SPRITE
    FIELD_COUNT: ClassVar[int] = 1 + 4

    kind: int = SpriteKind.CHICK
    x: float = 0.0
    y: float = 0.0
    angle: float = 0.0

    @classmethod
    def zero(cls) -> SpriteRecord:
        """Zero value used by the registry: a CHICK at the origin, unrotated."""
        return cls()

    @property
    def tag(self) -> int:
        return self.TAG

    def field_count(self) -> int:
        return self.FIELD_COUNT

    def write_fields(self, sink: FieldSink) -> None:
        sink.write_int32(self.kind)
        sink.write_float32(self.x)
        sink.write_float32(self.y)
        sink.write_float32(self.angle)

    def read_fields(self, source: FieldSource) -> None:
        self.kind = source.read_int32()
        self.x = source.read_float32()
        self.y = source.read_float32()
        self.angle = source.read_float32()


@dataclass(slots=True)
class BrushRecord:
    """Painter state: the rotation given to the next sprite and its increment."""

    TAG: ClassVar[TypeTag] = TypeTag.BRUSH
    FIELD_COUNT: ClassVar[int] = 1 + 2

    angle: float = 0.0
    step: float = 2.0

    @classmethod
    def zero(cls) -> BrushRecord:
        return cls()

    @property
    def tag(self) -> int:
        return self.TAG

    def field_count(self) -> int:
        return self.FIELD_COUNT

    def advance(self) -> float:
        """Return the current angle and move on by one step."""
        current = self.angle
        self.angle += self.step
        return current

    def write_fields(self, sink: FieldSink) -> None:
        sink.write_float32(self.angle)
        sink.write_float32(self.step)

    def read_fields(self, source: FieldSource) -> None:
        self.angle = source.read_float32()
        self.step = source.read_float32()
