import itertools

import pytest

from photopool.application import PhotoListing, PhotoMutations
from photopool.infrastructure import (
    FilesystemPhotoStorage,
    InMemoryPhotoStorage,
    JsonDescriptionStore,
    Settings,
)

ORIGIN = "http://testserver/uploads"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        upload_dir=tmp_path / "uploads",
        description_dir=tmp_path / "descriptions",
        sqlite_path=tmp_path / "descriptions.db",
        max_upload_mb=1,
    )


@pytest.fixture
def fs_storage(settings):
    return FilesystemPhotoStorage(settings.upload_dir)


@pytest.fixture
def memory_storage():
    return InMemoryPhotoStorage()


@pytest.fixture
def descriptions(settings):
    return JsonDescriptionStore(settings.description_dir)


@pytest.fixture
def ticking_clock():
    counter = itertools.count(1_700_000_000_000)
    return lambda: next(counter)


@pytest.fixture
def mutations(memory_storage, descriptions, ticking_clock):
    return PhotoMutations(memory_storage, descriptions, clock=ticking_clock)


@pytest.fixture
def listing(memory_storage, descriptions):
    return PhotoListing(memory_storage, descriptions)
