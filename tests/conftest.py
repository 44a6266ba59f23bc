"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from tagpack import FileStore, RecordCodec, SpriteRecord, TypeRegistry


@pytest.fixture
def registry():
    """Fresh registry with the built-in variants bound."""
    return TypeRegistry()


@pytest.fixture
def codec(registry):
    return RecordCodec(registry)


@pytest.fixture
def store(codec):
    return FileStore(codec)


@pytest.fixture
def sample_sprite():
    """The reference record: tag 1, kind 0 at (1.5, -2.25), rotated 90 degrees."""
    return SpriteRecord(kind=0, x=1.5, y=-2.25, angle=90.0)
