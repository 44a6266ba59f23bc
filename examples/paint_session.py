"""Paint sprites with fake mouse clicks, quit, relaunch and find them again.

Left click stamps a chick, right click a festival chick, middle click clears the
canvas. Each stamp is rotated a little further than the last; the brush angle is
saved alongside the sprites so the spiral continues after a restart.

Run:
    python examples/paint_session.py [save-file]
"""

from __future__ import annotations

import logging
import sys
import tempfile
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from tagpack import (
    BrushRecord,
    FileStore,
    RecordCodec,
    SaveSession,
    SpriteKind,
    SpriteRecord,
    TaggedRecord,
    TypeRegistry,
)


@dataclass
class Sprite:
    kind: SpriteKind
    x: float
    y: float
    angle: float


class Canvas:
    """In-memory stand-in for the scene graph."""

    def __init__(self) -> None:
        self.sprites: list[Sprite] = []
        self.brush = BrushRecord()

    def click(self, button: int, x: float, y: float) -> None:
        if button == 0:
            self.stamp(SpriteKind.CHICK, x, y)
        elif button == 1:
            self.stamp(SpriteKind.FESTIVAL_CHICK, x, y)
        elif button == 2:
            self.sprites.clear()

    def stamp(self, kind: SpriteKind, x: float, y: float) -> None:
        self.sprites.append(Sprite(kind, x, y, self.brush.advance()))

    # EntityHost

    def gather_entities(self) -> Iterator[TaggedRecord]:
        for s in self.sprites:
            yield SpriteRecord(kind=s.kind, x=s.x, y=s.y, angle=s.angle)
        yield BrushRecord(angle=self.brush.angle, step=self.brush.step)

    def restore_entity(self, record: TaggedRecord) -> None:
        match record:
            case SpriteRecord(kind=kind, x=x, y=y, angle=angle):
                self.sprites.append(Sprite(SpriteKind(kind), x, y, angle))
            case BrushRecord():
                self.brush = record
            case _:
                raise TypeError(f"Canvas cannot restore {type(record).__name__}")


def main(path: Path) -> None:
    store = FileStore(RecordCodec(TypeRegistry()))

    first = Canvas()
    SaveSession(store, first, lambda: path).load()
    for i in range(4):
        first.click(i % 2, float(i), float(-i))
    SaveSession(store, first, lambda: path).save()

    second = Canvas()
    SaveSession(store, second, lambda: path).load()
    for sprite in second.sprites:
        print(f"{sprite.kind.name:<15} ({sprite.x:+.2f}, {sprite.y:+.2f}) {sprite.angle:6.1f} deg")
    print(f"Next stamp angle: {second.brush.angle:.1f}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    if len(sys.argv) > 1:
        main(Path(sys.argv[1]))
    else:
        with tempfile.TemporaryDirectory() as tmp:
            main(Path(tmp) / "data.dat")
