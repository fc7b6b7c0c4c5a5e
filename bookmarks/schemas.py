"""Variant tags and the shapes declared for them on the object store."""
from __future__ import annotations

import logging
from typing import Any

from bookmarks.exceptions import UnknownVariantError
from bookmarks.models import ArchiveBookmark, BookmarkBase, BrowserBookmark, ReadLaterBookmark

logger = logging.getLogger(__name__)

VARIANTS: dict[str, type[BookmarkBase]] = {
    model.variant: model for model in (ArchiveBookmark, BrowserBookmark, ReadLaterBookmark)
}

SHAPES: dict[str, dict[str, Any]] = {tag: model.shape() for tag, model in VARIANTS.items()}


def model_for(tag: str) -> type[BookmarkBase]:
    try:
        return VARIANTS[tag]
    except KeyError:
        raise UnknownVariantError(tag) from None


def shape_for(tag: str) -> dict[str, Any]:
    return model_for(tag).shape()


def declare_types(store) -> None:
    """Declare every bookmark variant on ``store``. Safe to call repeatedly."""
    for tag, shape in SHAPES.items():
        store.declare_type(tag, shape)
    logger.debug("Declared bookmark types: %s", ", ".join(SHAPES))
