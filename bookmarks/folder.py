"""
Folder: a collection of bookmarks stored under one path prefix.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable
from urllib.parse import quote

from bookmarks.identity import id_for
from bookmarks.models import ARCHIVE, READLATER
from bookmarks.schemas import declare_types
from bookmarks.utils import utc_timestamp

logger = logging.getLogger(__name__)

# Folders whose bookmarks are always stored as one variant
FOLDER_VARIANTS = {"readlater": READLATER}


class Folder:
    def __init__(self, store, name: str, variant_override: str | None = None):
        if name in ("", ".", ".."):
            raise ValueError(f"invalid folder name: {name!r}")
        self.storage = store
        self.name = name
        # Same escaping as encodeURIComponent
        self.base_path = quote(name, safe="!~*'()")
        self.variant_override = variant_override or FOLDER_VARIANTS.get(name)
        self.client = store.scope(f"{self.base_path}/")
        declare_types(store)

    def __repr__(self) -> str:
        return f"Folder({self.name!r})"

    def _path(self, bookmark_id: str) -> str:
        return f"{self.base_path}/{bookmark_id}"

    def id_for_url(self, url: str) -> str:
        return id_for(url)

    async def get(self, bookmark_id: str) -> dict[str, Any] | None:
        return await self.storage.get_object(self._path(bookmark_id))

    async def get_all(self, max_age: int | None = None) -> list[dict[str, Any]]:
        bookmarks = await self.storage.get_all(f"{self.base_path}/", max_age)
        if not bookmarks:
            return []
        return list(bookmarks.values())

    async def search_by_url(self, url: str) -> dict[str, Any] | None:
        return await self.get(id_for(url))

    async def search_by_tags(self, tags: Iterable[str]) -> list[dict[str, Any]]:
        wanted = set(tags)
        bookmarks = await self.get_all()
        return [b for b in bookmarks if b.get("tags") and wanted.intersection(b["tags"])]

    async def store(self, bookmark: dict[str, Any], variant: str = ARCHIVE) -> dict[str, Any]:
        """Store ``bookmark`` under the id derived from its url.

        The dict is updated in place with ``id`` and a ``createdAt`` or
        ``updatedAt`` timestamp and returned once the write completed.
        """
        if not bookmark.get("url"):
            raise ValueError("bookmark has no url")
        bookmark["id"] = id_for(bookmark["url"])
        if bookmark.get("createdAt"):
            bookmark["updatedAt"] = utc_timestamp()
        else:
            bookmark["createdAt"] = utc_timestamp()

        variant = self.variant_override or variant
        await self.storage.store_object(variant, self._path(bookmark["id"]), bookmark)
        logger.info("Stored %s in %s", bookmark["url"], self.name)
        return bookmark

    async def remove(self, bookmark_id: str) -> None:
        await self.storage.remove(self._path(bookmark_id))
