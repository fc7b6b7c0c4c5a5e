import asyncio

import pytest

from bookmarks.exceptions import SchemaViolationError
from bookmarks.folder import Folder
from bookmarks.identity import id_for
from bookmarks.models import BROWSER, READLATER
from bookmarks.storage.local import LocalObjectStore


def run(coro):
    return asyncio.run(coro)


@pytest.fixture()
def archive(bookmarks):
    return bookmarks.open_folder("archive")


def test_store_new_bookmark(archive):
    stored = run(archive.store({"url": "http://e.com", "title": "E"}))
    assert stored["id"] == id_for("http://e.com")
    assert stored["createdAt"].endswith("Z")
    assert "updatedAt" not in stored
    assert run(archive.search_by_url("http://e.com")) == stored


def test_store_mutates_input(archive):
    bookmark = {"url": "http://e.com", "title": "E"}
    assert run(archive.store(bookmark)) is bookmark
    assert bookmark["id"] == id_for("http://e.com")


def test_store_existing_bookmark_sets_updated_at(archive):
    bookmark = {"url": "http://e.com", "title": "E", "createdAt": "2020-01-01T00:00:00.000Z"}
    stored = run(archive.store(bookmark))
    assert stored["createdAt"] == "2020-01-01T00:00:00.000Z"
    assert stored["updatedAt"] > stored["createdAt"]


def test_round_trip(archive):
    stored = run(archive.store({"url": "http://e.com", "title": "E", "tags": ["a"], "description": "d"}))
    fetched = run(archive.get(stored["id"]))
    assert fetched == stored
    assert fetched["@context"] == "http://remotestorage.io/spec/modules/bookmarks/archive-bookmark"


def test_same_url_overwrites(archive):
    run(archive.store({"url": "http://e.com", "title": "first"}))
    run(archive.store({"url": "http://e.com", "title": "second"}))
    everything = run(archive.get_all())
    assert len(everything) == 1
    assert everything[0]["title"] == "second"


def test_same_url_in_two_folders(bookmarks):
    one = run(bookmarks.open_folder("one").store({"url": "http://e.com", "title": "E"}))
    two = run(bookmarks.open_folder("two").store({"url": "http://e.com", "title": "E"}))
    assert one["id"] == two["id"]
    run(bookmarks.open_folder("one").remove(one["id"]))
    assert run(bookmarks.open_folder("two").get(two["id"])) is not None


def test_get_missing_returns_none(archive):
    assert run(archive.get("nope")) is None
    assert run(archive.search_by_url("http://missing.example")) is None


def test_get_all_empty_folder(archive):
    assert run(archive.get_all()) == []


def test_remove(archive):
    stored = run(archive.store({"url": "http://e.com", "title": "E"}))
    run(archive.remove(stored["id"]))
    assert run(archive.get(stored["id"])) is None
    assert run(archive.get_all()) == []


def test_remove_missing_is_not_an_error(archive):
    assert run(archive.remove(id_for("http://never.stored"))) is None


def test_search_by_tags(archive):
    run(archive.store({"url": "http://a.com", "title": "A", "tags": ["b", "c"]}))
    run(archive.store({"url": "http://b.com", "title": "B", "tags": ["c", "d"]}))
    run(archive.store({"url": "http://c.com", "title": "C", "tags": []}))
    run(archive.store({"url": "http://d.com", "title": "D"}))
    found = run(archive.search_by_tags(["a", "b"]))
    assert [b["url"] for b in found] == ["http://a.com"]


def test_search_by_tags_empty_folder(archive):
    assert run(archive.search_by_tags(["a"])) == []


def test_search_by_url_only_finds_canonical_id(archive):
    run(archive.store({"url": "http://e.com", "title": "E"}))
    assert run(archive.search_by_url("http://e.com/")) is None


def test_readlater_forces_variant(bookmarks):
    readlater = bookmarks.open_folder("readlater")
    stored = run(readlater.store({"url": "http://e.com", "unread": True}, BROWSER))
    assert stored["@context"].endswith("/" + READLATER)


def test_readlater_unread_defaults_to_true(bookmarks):
    readlater = bookmarks.open_folder("readlater")
    stored = run(readlater.store({"url": "http://e.com", "title": "E"}))
    assert stored["unread"] is True
    assert run(readlater.get(stored["id"])) == stored


def test_readlater_keeps_explicit_unread(bookmarks):
    stored = run(bookmarks.open_folder("readlater").store({"url": "http://e.com", "unread": False}))
    assert stored["unread"] is False


def test_archive_defaults_filled(archive):
    stored = run(archive.store({"url": "http://e.com", "title": "E"}))
    assert stored["tags"] == []
    assert stored["description"] == ""
    assert "thumbnail" not in stored


def test_explicit_variant(bookmarks):
    folder = bookmarks.open_folder("toolbar")
    stored = run(folder.store({"url": "http://e.com", "title": "E"}, BROWSER))
    assert stored["@context"].endswith("/" + BROWSER)


def test_variant_override(bookmarks):
    folder = bookmarks.open_folder("later", variant=READLATER)
    assert folder.variant_override == READLATER
    stored = run(folder.store({"url": "http://e.com", "unread": False}))
    assert stored["@context"].endswith("/" + READLATER)


def test_schema_violation_writes_nothing(archive):
    with pytest.raises(SchemaViolationError):
        run(archive.store({"url": "http://e.com"}))
    assert run(archive.get_all()) == []


def test_store_without_url_fails_fast(archive):
    with pytest.raises(ValueError):
        run(archive.store({"title": "E"}))
    assert run(archive.get_all()) == []


def test_base_path_is_escaped(store):
    folder = Folder(store, "read later/x")
    assert folder.base_path == "read%20later%2Fx"
    assert folder.client.prefix == "read%20later%2Fx/"


def test_max_age_is_forwarded(tmp_path):
    seen = []

    class RecordingStore(LocalObjectStore):
        async def get_all(self, path, max_age=None):
            seen.append((path, max_age))
            return await super().get_all(path, max_age)

    folder = Folder(RecordingStore(tmp_path), "archive")
    run(folder.get_all(60))
    run(folder.search_by_tags(["a"]))
    assert seen == [("archive/", 60), ("archive/", None)]


def test_id_for_url(archive):
    assert archive.id_for_url("http://e.com") == id_for("http://e.com")


def test_folder_without_facade_declares_types(tmp_path):
    folder = Folder(LocalObjectStore(tmp_path), "archive")
    stored = run(folder.store({"url": "http://e.com", "title": "E"}))
    assert run(folder.search_by_url("http://e.com")) == stored


@pytest.mark.parametrize("name", ["", ".", ".."])
def test_invalid_folder_names(store, name):
    with pytest.raises(ValueError):
        Folder(store, name)


def test_dotted_folder_names_are_fine(bookmarks):
    folder = bookmarks.open_folder("a.b")
    stored = run(folder.store({"url": "http://e.com", "title": "E"}))
    assert run(folder.get_all()) == [stored]


def test_failed_write_leaves_input_unstamped(tmp_path):
    class FailingStore(LocalObjectStore):
        async def put(self, path, record):
            raise OSError("disk full")

    bookmark = {"url": "http://e.com", "title": "E"}
    with pytest.raises(OSError):
        run(Folder(FailingStore(tmp_path), "archive").store(bookmark))
    assert "@context" not in bookmark
    assert "description" not in bookmark
