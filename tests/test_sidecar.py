import pytest

from photopool.infrastructure import JsonDescriptionStore, SQLiteDescriptionStore, build_description_store


@pytest.fixture(params=["json", "sqlite"])
def store(request, tmp_path):
    if request.param == "json":
        return JsonDescriptionStore(tmp_path / "descriptions")
    return SQLiteDescriptionStore(tmp_path / "descriptions.db")


def test_put_and_get(store):
    store.put("cat.jpg", "a cat")

    assert store.get("cat.jpg") == "a cat"
    assert store.get("dog.png") is None


def test_put_overwrites(store):
    store.put("cat.jpg", "a cat")
    store.put("cat.jpg", "a different cat")

    assert store.get("cat.jpg") == "a different cat"


def test_get_many_returns_only_known(store):
    store.put("a.jpg", "A")
    store.put("c.jpg", "C")

    assert store.get_many(["a.jpg", "b.jpg", "c.jpg"]) == {"a.jpg": "A", "c.jpg": "C"}
    assert store.get_many([]) == {}


def test_delete(store):
    store.put("cat.jpg", "a cat")

    assert store.delete("cat.jpg") is True
    assert store.delete("cat.jpg") is False
    assert store.get("cat.jpg") is None


def test_keys(store):
    store.put("a.jpg", "A")
    store.put("b.png", "B")

    assert store.keys() == {"a.jpg", "b.png"}


def test_unicode_round_trip(store):
    store.put("cat.jpg", "猫の写真 📷")

    assert store.get("cat.jpg") == "猫の写真 📷"


def test_health_check(store):
    assert store.health_check()["status"] == "healthy"


def test_json_store_ignores_corrupt_document(tmp_path):
    store = JsonDescriptionStore(tmp_path / "descriptions")
    (store.directory / "cat.jpg.json").write_text("{not json", encoding="utf-8")

    assert store.get("cat.jpg") is None


def test_json_store_persists_across_instances(tmp_path):
    JsonDescriptionStore(tmp_path / "d").put("cat.jpg", "a cat")

    assert JsonDescriptionStore(tmp_path / "d").get("cat.jpg") == "a cat"


def test_sqlite_store_persists_across_instances(tmp_path):
    SQLiteDescriptionStore(tmp_path / "d.db").put("cat.jpg", "a cat")

    assert SQLiteDescriptionStore(tmp_path / "d.db").get("cat.jpg") == "a cat"


def test_build_description_store_follows_settings(settings):
    assert isinstance(build_description_store(settings), JsonDescriptionStore)

    sqlite_settings = settings.model_copy(update={"description_backend": "sqlite"})
    assert isinstance(build_description_store(sqlite_settings), SQLiteDescriptionStore)
