from __future__ import annotations

import logging
from typing import Any

from fastapi import Body, Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse

from bookmarks.config import settings
from bookmarks.exceptions import SchemaViolationError, UnknownVariantError
from bookmarks.models import ARCHIVE
from bookmarks.module import Bookmarks, create_bookmarks
from bookmarks.utils import is_valid_url

logger = logging.getLogger(__name__)
app = FastAPI(title=settings.app_name)

_bookmarks: Bookmarks | None = None


def get_bookmarks() -> Bookmarks:
    global _bookmarks
    if _bookmarks is None:
        _bookmarks = create_bookmarks()
    return _bookmarks


@app.exception_handler(SchemaViolationError)
async def schema_violation(request: Request, exc: SchemaViolationError):
    return JSONResponse({"error": f"invalid {exc.tag}", "errors": exc.errors}, status_code=422)


@app.exception_handler(UnknownVariantError)
async def unknown_variant(request: Request, exc: UnknownVariantError):
    return JSONResponse({"error": str(exc)}, status_code=400)


def _not_found(name: str) -> JSONResponse:
    return JSONResponse({"error": f"bookmark not found in {name}"}, status_code=404)


@app.get("/schemas")
async def schemas(bookmarks: Bookmarks = Depends(get_bookmarks)):
    return bookmarks.shapes


@app.get("/folders/{name}/bookmarks")
async def list_bookmarks(name: str, max_age: int | None = None, bookmarks: Bookmarks = Depends(get_bookmarks)):
    return await bookmarks.open_folder(name).get_all(max_age)


@app.get("/folders/{name}/bookmarks/{bookmark_id}")
async def get_bookmark(name: str, bookmark_id: str, bookmarks: Bookmarks = Depends(get_bookmarks)):
    bookmark = await bookmarks.open_folder(name).get(bookmark_id)
    if bookmark is None:
        return _not_found(name)
    return bookmark


@app.get("/folders/{name}/search")
async def search(
    name: str,
    url: str | None = None,
    tag: list[str] = Query([]),
    bookmarks: Bookmarks = Depends(get_bookmarks),
):
    folder = bookmarks.open_folder(name)
    if url:
        bookmark = await folder.search_by_url(url)
        if bookmark is None:
            return _not_found(name)
        return bookmark
    if tag:
        return await folder.search_by_tags(tag)
    return JSONResponse({"error": "pass url or tag"}, status_code=400)


@app.post("/folders/{name}/bookmarks")
async def store_bookmark(
    name: str,
    bookmark: dict[str, Any] = Body(...),
    variant: str = ARCHIVE,
    bookmarks: Bookmarks = Depends(get_bookmarks),
):
    if not is_valid_url(str(bookmark.get("url", ""))):
        return JSONResponse({"error": "invalid url"}, status_code=400)
    return await bookmarks.open_folder(name).store(bookmark, variant)


@app.delete("/folders/{name}/bookmarks/{bookmark_id}")
async def remove_bookmark(name: str, bookmark_id: str, bookmarks: Bookmarks = Depends(get_bookmarks)):
    await bookmarks.open_folder(name).remove(bookmark_id)
    return {"ok": True}
