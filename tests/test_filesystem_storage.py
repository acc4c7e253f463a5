import shutil

import pytest

from photopool.domain.errors import InvalidInput, IOFailure, NotFound, WriteConflict
from photopool.infrastructure import FilesystemPhotoStorage


def test_put_stat_and_list(fs_storage):
    name = fs_storage.put("cat.jpg", b"abc")

    assert name == "cat.jpg"
    assert fs_storage.stat(name).size_bytes == 3
    assert fs_storage.list_names() == {"cat.jpg"}
    assert (fs_storage.root / "cat.jpg").read_bytes() == b"abc"


def test_put_never_overwrites(fs_storage):
    first = fs_storage.put("cat.jpg", b"first")
    second = fs_storage.put("cat.jpg", b"second!")

    assert first == "cat.jpg"
    assert second == "cat-1.jpg"
    assert (fs_storage.root / "cat.jpg").read_bytes() == b"first"
    assert fs_storage.stat(second).size_bytes == 7


def test_put_raises_write_conflict_when_budget_exhausted(tmp_path):
    storage = FilesystemPhotoStorage(tmp_path / "pool", name_retry_budget=1)
    storage.put("cat.jpg", b"1")
    storage.put("cat.jpg", b"2")

    with pytest.raises(WriteConflict):
        storage.put("cat.jpg", b"3")

    assert storage.list_names() == {"cat.jpg", "cat-1.jpg"}


def test_put_leaves_no_staging_files(fs_storage):
    fs_storage.put("cat.jpg", b"abc")
    fs_storage.put("cat.jpg", b"abc")

    assert sorted(p.name for p in fs_storage.root.iterdir()) == ["cat-1.jpg", "cat.jpg"]


def test_remove_twice_reports_not_found(fs_storage):
    fs_storage.put("cat.jpg", b"abc")

    fs_storage.remove("cat.jpg")
    with pytest.raises(NotFound):
        fs_storage.remove("cat.jpg")


def test_stat_missing_raises_not_found(fs_storage):
    with pytest.raises(NotFound):
        fs_storage.stat("missing.jpg")


def test_list_skips_hidden_files_and_directories(fs_storage):
    fs_storage.put("dog.png", b"12345")
    (fs_storage.root / ".tmp-abc").write_bytes(b"partial")
    (fs_storage.root / ".DS_Store").write_bytes(b"")
    (fs_storage.root / "nested").mkdir()

    assert fs_storage.list_names() == {"dog.png"}


def test_directory_is_not_a_photo(fs_storage):
    (fs_storage.root / "nested").mkdir()

    with pytest.raises(NotFound):
        fs_storage.stat("nested")
    with pytest.raises(NotFound):
        fs_storage.remove("nested")


@pytest.mark.parametrize("bad", ["../escape.jpg", ".hidden", "a/b.jpg"])
def test_unsafe_names_rejected(fs_storage, bad):
    with pytest.raises(InvalidInput):
        fs_storage.remove(bad)


def test_list_names_fails_when_pool_is_gone(fs_storage):
    shutil.rmtree(fs_storage.root)

    with pytest.raises(IOFailure):
        fs_storage.list_names()


def test_locate_is_derived_from_root(fs_storage):
    assert fs_storage.locate("cat.jpg") == str(fs_storage.root / "cat.jpg")


def test_health_check(fs_storage):
    assert fs_storage.health_check()["status"] == "healthy"
