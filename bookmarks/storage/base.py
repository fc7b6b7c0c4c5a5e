from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from bookmarks.config import settings
from bookmarks.exceptions import SchemaViolationError, UnknownVariantError

logger = logging.getLogger(__name__)

CONTEXT_BASE = "http://remotestorage.io/spec/modules"


class ObjectStore(ABC):
    """Path-addressed JSON document store.

    Paths are relative to the module root. A path ending in ``/`` names a
    folder. Typed writes are checked against the shape declared for their tag
    and stamped with an ``@context`` naming it.
    """

    name: str

    def __init__(self, module_name: str | None = None):
        self.module_name = module_name or settings.module_name
        self._types: dict[str, dict[str, Any]] = {}
        self._validators: dict[str, Draft202012Validator] = {}

    def declare_type(self, tag: str, shape: dict[str, Any]) -> None:
        if self._types.get(tag) == shape:
            return
        if tag in self._types:
            logger.warning("Replacing declared type %s", tag)
        self._types[tag] = shape
        self._validators[tag] = Draft202012Validator(shape)

    @property
    def types(self) -> dict[str, dict[str, Any]]:
        return dict(self._types)

    def context_for(self, tag: str) -> str:
        return f"{CONTEXT_BASE}/{self.module_name}/{tag}"

    def validate(self, tag: str, record: dict[str, Any]) -> None:
        validator = self._validators.get(tag)
        if validator is None:
            raise UnknownVariantError(tag)
        errors = []
        for error in validator.iter_errors(record):
            pointer = "/".join(str(p) for p in error.path)
            errors.append(f"{pointer}: {error.message}" if pointer else error.message)
        if errors:
            raise SchemaViolationError(tag, errors)

    def with_defaults(self, tag: str, record: dict[str, Any]) -> dict[str, Any]:
        """Copy of ``record`` with declared defaults filled in for missing properties."""
        shape = self._types.get(tag)
        if shape is None:
            raise UnknownVariantError(tag)
        document = dict(record)
        for name, prop in shape.get("properties", {}).items():
            if name not in document and "default" in prop:
                document[name] = deepcopy(prop["default"])
        return document

    async def store_object(self, tag: str, path: str, record: dict[str, Any]) -> None:
        document = self.with_defaults(tag, record)
        self.validate(tag, document)
        document["@context"] = self.context_for(tag)
        await self.put(path, document)
        # The caller sees defaults and @context only once the write went through
        record.update(document)
        logger.debug("Stored %s at %s", tag, path)

    def scope(self, prefix: str) -> ScopedObjectStore:
        return ScopedObjectStore(self, prefix)

    @abstractmethod
    async def get_object(self, path: str) -> dict[str, Any] | None:
        raise NotImplementedError

    @abstractmethod
    async def get_all(self, path: str, max_age: int | None = None) -> dict[str, dict[str, Any]] | None:
        """Map of item name to document for every document directly under ``path``."""
        raise NotImplementedError

    @abstractmethod
    async def put(self, path: str, record: dict[str, Any]) -> None:
        raise NotImplementedError

    @abstractmethod
    async def remove(self, path: str) -> None:
        raise NotImplementedError


class ScopedObjectStore:
    """View of a store with every path prefixed by ``prefix``."""

    def __init__(self, store: ObjectStore, prefix: str):
        self.store = store
        self.prefix = prefix

    def declare_type(self, tag: str, shape: dict[str, Any]) -> None:
        self.store.declare_type(tag, shape)

    def scope(self, prefix: str) -> ScopedObjectStore:
        return ScopedObjectStore(self.store, self.prefix + prefix)

    async def get_object(self, path: str) -> dict[str, Any] | None:
        return await self.store.get_object(self.prefix + path)

    async def get_all(self, path: str = "", max_age: int | None = None) -> dict[str, dict[str, Any]] | None:
        return await self.store.get_all(self.prefix + path, max_age)

    async def store_object(self, tag: str, path: str, record: dict[str, Any]) -> None:
        await self.store.store_object(tag, self.prefix + path, record)

    async def remove(self, path: str) -> None:
        await self.store.remove(self.prefix + path)
