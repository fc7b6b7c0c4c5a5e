from pathlib import Path

import pytest

from bookmarks.module import Bookmarks
from bookmarks.storage.local import LocalObjectStore


@pytest.fixture()
def store(tmp_path: Path) -> LocalObjectStore:
    return LocalObjectStore(tmp_path)


@pytest.fixture()
def bookmarks(store: LocalObjectStore) -> Bookmarks:
    return Bookmarks(store)
