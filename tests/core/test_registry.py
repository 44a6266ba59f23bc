"""Tests for TypeRegistry."""

import pytest

from tagpack import BrushRecord, SpriteRecord, TypeRegistry, TypeTag, UnknownTypeTag
from tagpack.core.types import UINT32_MAX


def test_builtins_bound_at_construction(registry):
    """SPRITE and BRUSH resolve to factories for their own variants."""
    assert registry.tags() == (TypeTag.SPRITE, TypeTag.BRUSH)
    assert isinstance(registry.resolve(TypeTag.SPRITE)(), SpriteRecord)
    assert isinstance(registry.resolve(TypeTag.BRUSH)(), BrushRecord)


def test_empty_registry_without_builtins():
    registry = TypeRegistry(builtins=False)

    assert len(registry) == 0
    assert TypeTag.SPRITE not in registry


def test_factory_returns_fresh_zero_instances(registry):
    """Factories build new instances; the registry never hands out shared state."""
    factory = registry.resolve(TypeTag.SPRITE)
    first = factory()
    second = factory()

    assert first is not second
    assert first == SpriteRecord(kind=0, x=0.0, y=0.0, angle=0.0)


def test_resolve_unbound_tag_raises(registry):
    with pytest.raises(UnknownTypeTag) as exc_info:
        registry.resolve(9999)

    assert exc_info.value.tag == 9999
    assert "9999" in str(exc_info.value)


def test_unknown_type_tag_is_lookup_error(registry):
    """Callers catching LookupError also catch unbound tags."""
    with pytest.raises(LookupError):
        registry.resolve(42)


def test_last_bind_wins(registry):
    """Rebinding a tag overwrites silently."""
    registry.bind(TypeTag.SPRITE, BrushRecord.zero)

    assert isinstance(registry.resolve(TypeTag.SPRITE)(), BrushRecord)
    assert len(registry) == 2


def test_bind_accepts_plain_int_tags(registry):
    registry.bind(100, SpriteRecord.zero)

    assert registry.is_bound(100)
    assert 100 in registry
    assert registry.tags() == (1, 2, 100)


@pytest.mark.parametrize("tag", [0, TypeTag.UNKNOWN, -1, UINT32_MAX + 1, True, "1"])
def test_bind_rejects_invalid_tags(registry, tag):
    """Tag 0 is reserved; tags must fit in uint32."""
    with pytest.raises(ValueError, match="Type tag"):
        registry.bind(tag, SpriteRecord.zero)


def test_bind_rejects_non_callable_factory(registry):
    with pytest.raises(TypeError, match="not callable"):
        registry.bind(100, SpriteRecord())  # type: ignore[arg-type]


def test_bind_class_uses_zero_and_tag():
    registry = TypeRegistry(builtins=False)
    registry.bind_class(BrushRecord)

    assert registry.resolve(TypeTag.BRUSH) == BrushRecord.zero


def test_bind_class_with_explicit_tag():
    class Plain:
        pass

    registry = TypeRegistry(builtins=False)
    registry.bind_class(Plain, tag=7)

    assert registry.resolve(7) is Plain


def test_bind_class_without_tag_raises():
    class Untagged:
        pass

    with pytest.raises(TypeError, match="has no TAG"):
        TypeRegistry().bind_class(Untagged)


def test_registries_are_independent():
    """Binding on one registry never leaks into another."""
    a = TypeRegistry()
    b = TypeRegistry()
    a.bind(500, SpriteRecord.zero)

    assert 500 in a
    assert 500 not in b
