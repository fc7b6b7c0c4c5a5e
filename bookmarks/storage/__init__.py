from bookmarks.storage.base import ObjectStore, ScopedObjectStore
from bookmarks.storage.local import LocalObjectStore
from bookmarks.storage.remote import RemoteStorageClient

__all__ = ["ObjectStore", "ScopedObjectStore", "LocalObjectStore", "RemoteStorageClient"]
