"""Tests for FileStore."""

from unittest.mock import patch

import pytest

from tagpack import (
    BrushRecord,
    FieldCountMismatch,
    FileStore,
    MalformedRecord,
    RecordStore,
    SaveData,
    SpriteRecord,
    UnknownTypeTag,
)


@pytest.fixture
def save_path(tmp_path):
    return tmp_path / "data.dat"


def test_file_store_is_record_store(store):
    assert isinstance(store, RecordStore)


def test_save_then_load(store, save_path, sample_sprite):
    records = [sample_sprite, SpriteRecord(kind=1, x=-4.0, y=8.5, angle=180.0), BrushRecord(6.0)]
    store.save(save_path, SaveData(records))

    loaded = store.load(save_path, SaveData())

    assert loaded.records == records


def test_file_holds_only_the_encoded_container(store, save_path, sample_sprite):
    """No magic, header or version: the file is exactly the encoded array."""
    store.save(save_path, SaveData([sample_sprite]))

    assert save_path.read_bytes() == store.codec.encode_many([sample_sprite])
    assert save_path.read_bytes()[:2] == b"\x91\x95"


def test_load_missing_file_returns_default(store, save_path):
    default = SaveData([SpriteRecord(kind=1)])

    result = store.load(save_path, default)

    assert result is default
    assert not save_path.exists()


def test_save_twice_is_byte_identical(store, save_path, sample_sprite):
    data = SaveData([sample_sprite, BrushRecord()])

    store.save(save_path, data)
    first = save_path.read_bytes()
    store.save(save_path, data)

    assert save_path.read_bytes() == first


def test_save_truncates_previous_content(store, save_path, sample_sprite):
    store.save(save_path, SaveData([sample_sprite] * 10))
    store.save(save_path, SaveData())

    assert save_path.read_bytes() == b"\x90"
    assert store.load(save_path, SaveData([sample_sprite])).records == []


def test_save_creates_parent_directories(store, tmp_path):
    path = tmp_path / "nested" / "saves" / "data.dat"

    store.save(path, SaveData())

    assert path.exists()


def test_save_accepts_str_paths(store, save_path, sample_sprite):
    store.save(str(save_path), SaveData([sample_sprite]))

    assert store.load(str(save_path), SaveData()).records == [sample_sprite]


def test_encode_failure_leaves_existing_file(store, save_path, sample_sprite):
    """Encoding happens before the file is opened."""
    store.save(save_path, SaveData([sample_sprite]))
    before = save_path.read_bytes()

    with pytest.raises(ValueError):
        store.save(save_path, SaveData([SpriteRecord(kind=2**40)]))

    assert save_path.read_bytes() == before


def test_io_errors_propagate(store, tmp_path):
    """Writing where a directory stands fails with the OS error, unwrapped."""
    with pytest.raises(IsADirectoryError):
        store.save(tmp_path, SaveData())


class _DiskFullFile:
    """File wrapper whose write fails like a full disk."""

    def __init__(self, fh):
        self._fh = fh
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self._fh.close()
        self.closed = True

    def write(self, data):
        raise OSError(28, "No space left on device")

    def flush(self):
        self._fh.flush()


def test_file_closed_when_write_fails(store, save_path):
    """The with block closes the handle and the OS error propagates unchanged."""
    handles = []
    real_open = open

    def failing_open(*args, **kwargs):
        fh = _DiskFullFile(real_open(*args, **kwargs))
        handles.append(fh)
        return fh

    with patch("tagpack.storage.file.open", failing_open, create=True):
        with pytest.raises(OSError, match="No space left"):
            store.save(save_path, SaveData())

    assert len(handles) == 1
    assert handles[0].closed


def test_corrupt_file_raises(store, save_path):
    save_path.write_bytes(b"\x91\x93\x01\x00")

    with pytest.raises(FieldCountMismatch):
        store.load(save_path, SaveData())


def test_unknown_tag_in_file_raises(store, save_path):
    save_path.write_bytes(bytes.fromhex("9192cd270f"))

    with pytest.raises(UnknownTypeTag):
        store.load(save_path, SaveData())


def test_truncated_file_raises(store, save_path, sample_sprite):
    store.save(save_path, SaveData([sample_sprite]))
    save_path.write_bytes(save_path.read_bytes()[:-1])

    with pytest.raises(MalformedRecord):
        store.load(save_path, SaveData())


def test_stores_share_no_state(codec, tmp_path, sample_sprite):
    a = FileStore(codec)
    b = FileStore(codec)
    a.save(tmp_path / "a.dat", SaveData([sample_sprite]))

    assert b.load(tmp_path / "a.dat", SaveData()).records == [sample_sprite]
    assert b.load(tmp_path / "b.dat", SaveData()).records == []
