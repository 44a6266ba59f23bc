"""Type registry mapping wire tags to record factories.

Usage:
    registry = TypeRegistry()             # SPRITE and BRUSH already bound
    registry.bind(100, Score)             # extension variant
    record = registry.resolve(TypeTag.SPRITE)()
"""

from __future__ import annotations

import logging

from tagpack.core.record.variants import BrushRecord, SpriteRecord
from tagpack.core.types import UINT32_MAX, RecordFactory, is_valid_tag
from tagpack.serialization.errors import UnknownTypeTag

_logger = logging.getLogger(__name__)

_BUILTINS: tuple[type, ...] = (SpriteRecord, BrushRecord)


class TypeRegistry:
    """Process-local table from type tag to empty-instance factory.

    Maps tags to factories, never to live instances. Built-in variants are bound
    at construction; extensions must be bound before the first decode that
    meets their tag. Binds are not locked: do them during startup, after which
    concurrent resolves are safe.

    Args:
        builtins: Bind the built-in variants (default True).
    """

    def __init__(self, builtins: bool = True) -> None:
        """Initialize registry, optionally with the built-in variants bound.

        Args:
            builtins: Bind SpriteRecord and BrushRecord under their tags.
        """
        self._factories: dict[int, RecordFactory] = {}
        if builtins:
            for cls in _BUILTINS:
                self.bind_class(cls)

    def bind(self, tag: int, factory: RecordFactory) -> None:
        """Install or overwrite the factory for a tag. Last bind wins.

        Args:
            tag: Type tag in ``1..UINT32_MAX``.
            factory: Zero-argument callable returning an empty record.

        Raises:
            ValueError: If tag is reserved (0) or outside the uint32 range.
            TypeError: If factory is not callable.
        """
        if not is_valid_tag(tag):
            raise ValueError(f"Type tag must be an int in 1..{UINT32_MAX}, got {tag!r}")
        if not callable(factory):
            raise TypeError(f"Factory for tag {tag} is not callable: {factory!r}")

        tag = int(tag)
        if tag in self._factories:
            _logger.debug("Rebinding type tag %d to %r", tag, factory)
        else:
            _logger.debug("Binding type tag %d to %r", tag, factory)
        self._factories[tag] = factory

    def bind_class(self, cls: type, tag: int | None = None) -> None:
        """Bind a record class, using its ``zero`` classmethod when present.

        Args:
            cls: Record class to bind.
            tag: Tag to bind under. Defaults to ``cls.TAG``.

        Raises:
            TypeError: If no tag is given and cls has no ``TAG`` attribute.
        """
        if tag is None:
            tag = getattr(cls, "TAG", None)
            if tag is None:
                raise TypeError(f"{cls.__name__} has no TAG; pass tag= explicitly")
        self.bind(tag, getattr(cls, "zero", cls))

    def resolve(self, tag: int) -> RecordFactory:
        """Look up the factory bound to a tag.

        Args:
            tag: Type tag read from the wire.

        Returns:
            The bound factory.

        Raises:
            UnknownTypeTag: If nothing is bound under tag.
        """
        try:
            return self._factories[tag]
        except KeyError:
            raise UnknownTypeTag(tag) from None

    def is_bound(self, tag: int) -> bool:
        """Check if a factory is bound under tag."""
        return tag in self._factories

    def tags(self) -> tuple[int, ...]:
        """All bound tags, ascending."""
        return tuple(sorted(self._factories))

    def __contains__(self, tag: object) -> bool:
        return tag in self._factories

    def __len__(self) -> int:
        return len(self._factories)
