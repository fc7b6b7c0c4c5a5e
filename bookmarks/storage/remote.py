"""
remoteStorage client: documents live under ``<storage_root>/<module>/`` on a
server speaking the remoteStorage protocol (plain GET/PUT/DELETE, JSON-LD
folder listings).
"""
from __future__ import annotations

import logging
from typing import Any

import httpx

from bookmarks.config import settings
from bookmarks.storage.base import ObjectStore

logger = logging.getLogger(__name__)


class RemoteStorageClient(ObjectStore):
    """Minimal async remoteStorage client. No caching, no retries."""

    name = "remote"

    def __init__(
        self,
        storage_root: str | None = None,
        token: str | None = None,
        timeout: float | None = None,
        module_name: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(module_name)
        self.base = (storage_root or settings.storage_root).rstrip("/") + "/" + self.module_name
        self.token = settings.storage_token if token is None else token
        self.timeout = timeout or settings.request_timeout
        self.transport = transport
        self._headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}

    def _url(self, path: str) -> str:
        return f"{self.base}/{path}"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport, headers=self._headers)

    async def get_object(self, path: str) -> dict[str, Any] | None:
        async with self._client() as client:
            return await self._fetch(client, path)

    async def _fetch(self, client: httpx.AsyncClient, path: str) -> dict[str, Any] | None:
        res = await client.get(self._url(path))
        if res.status_code == 404:
            logger.debug("No document at %s", path)
            return None
        res.raise_for_status()
        return res.json()

    async def get_all(self, path: str, max_age: int | None = None) -> dict[str, dict[str, Any]] | None:
        if max_age is not None:
            logger.debug("Ignoring max_age=%s for %s, remote reads are never cached", max_age, path)
        if not path.endswith("/"):
            path += "/"
        async with self._client() as client:
            listing = await self._fetch(client, path)
            if not listing:
                return None
            # Protocol drafts before 02 list items as bare {name: etag}
            items = listing.get("items", listing)
            documents = {}
            for item in items:
                if item.endswith("/") or item.startswith("@"):
                    continue
                document = await self._fetch(client, path + item)
                if document is not None:
                    documents[item] = document
        return documents or None

    async def put(self, path: str, record: dict[str, Any]) -> None:
        async with self._client() as client:
            res = await client.put(self._url(path), json=record, headers={"Content-Type": "application/json"})
            res.raise_for_status()

    async def remove(self, path: str) -> None:
        async with self._client() as client:
            res = await client.delete(self._url(path))
            if res.status_code == 404:
                logger.debug("Nothing to remove at %s", path)
                return
            res.raise_for_status()
        logger.info("Removed %s", path)
