from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from bookmarks.config import settings
from bookmarks.storage.base import ObjectStore

logger = logging.getLogger(__name__)


class LocalObjectStore(ObjectStore):
    """Keeps every document as a JSON file under ``base_dir/<module>/``."""

    name = "local"

    def __init__(self, base_dir: str | Path | None = None, module_name: str | None = None):
        super().__init__(module_name)
        self.root = (Path(base_dir or settings.base_storage_dir) / self.module_name).resolve()

    def _file(self, path: str) -> Path:
        relative = path[:-1] if path.endswith("/") else path
        if relative and any(part in ("", ".", "..") for part in relative.split("/")):
            raise ValueError(f"invalid store path: {path!r}")
        return self.root / relative

    async def get_object(self, path: str) -> dict[str, Any] | None:
        file = self._file(path)
        if not file.is_file():
            logger.debug("No document at %s", path)
            return None
        return json.loads(file.read_text(encoding="utf-8"))

    async def get_all(self, path: str, max_age: int | None = None) -> dict[str, dict[str, Any]] | None:
        # Local files are always fresh
        folder = self._file(path)
        if not folder.is_dir():
            return None
        return {
            item.name: json.loads(item.read_text(encoding="utf-8"))
            for item in sorted(folder.iterdir())
            if item.is_file()
        }

    async def put(self, path: str, record: dict[str, Any]) -> None:
        file = self._file(path)
        file.parent.mkdir(parents=True, exist_ok=True)
        file.write_text(json.dumps(record, indent=2, ensure_ascii=False), encoding="utf-8")

    async def remove(self, path: str) -> None:
        file = self._file(path)
        if not file.is_file():
            logger.debug("Nothing to remove at %s", path)
            return
        file.unlink()
        logger.info("Removed %s", path)
        # Empty folders disappear, as on a remoteStorage server
        parent = file.parent
        while parent != self.root and not any(parent.iterdir()):
            parent.rmdir()
            parent = parent.parent
