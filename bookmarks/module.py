from __future__ import annotations

import logging
from typing import Any

from bookmarks.config import Settings, settings as default_settings
from bookmarks.folder import Folder
from bookmarks.schemas import SHAPES, declare_types
from bookmarks.storage.local import LocalObjectStore
from bookmarks.storage.remote import RemoteStorageClient

logger = logging.getLogger(__name__)

LEGACY_FOLDER = "archive"


class Bookmarks:
    """Entry point: opens folders on one object store."""

    name = "bookmarks"

    def __init__(self, client):
        self.client = client
        declare_types(client)
        # Deprecated, use open_folder("archive")
        self.archive = Folder(client, LEGACY_FOLDER)

    @property
    def shapes(self) -> dict[str, dict[str, Any]]:
        return dict(SHAPES)

    def open_folder(self, name: str, variant: str | None = None) -> Folder:
        return Folder(self.client, name, variant_override=variant)


def create_store(config: Settings | None = None):
    config = config or default_settings
    if config.storage_backend == "remote":
        if not config.storage_root:
            raise RuntimeError("remoteStorage is not configured")
        return RemoteStorageClient(
            config.storage_root,
            token=config.storage_token,
            timeout=config.request_timeout,
            module_name=config.module_name,
        )
    if config.storage_backend == "local":
        return LocalObjectStore(config.base_storage_dir, module_name=config.module_name)
    raise RuntimeError(f"Unknown storage backend: {config.storage_backend}")


def create_bookmarks(config: Settings | None = None) -> Bookmarks:
    store = create_store(config)
    logger.info("Using %s object store", store.name)
    return Bookmarks(store)
