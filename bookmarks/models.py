"""
Bookmark record types. Each variant composes the shared BookmarkBase fields
with its own extensions; the JSON shape declared to the object store is
generated from the model.
"""
from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

ARCHIVE = "archive-bookmark"
BROWSER = "browser-bookmark"
READLATER = "readlater-bookmark"


def _declared_shape(schema: dict[str, Any], model: type[BookmarkBase]) -> None:
    # Stored documents never hold nulls, so optional fields are declared by type only
    schema.pop("title", None)
    for prop in schema.get("properties", {}).values():
        prop.pop("title", None)
        for option in prop.pop("anyOf", []):
            if option.get("type") != "null":
                prop.update(option)
        if "default" in prop and prop["default"] is None:
            del prop["default"]
    schema["required"] = list(model.required_fields)


class BookmarkBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow", json_schema_extra=_declared_shape)

    variant: ClassVar[str]
    required_fields: ClassVar[tuple[str, ...]] = ("id", "url")

    id: str | None = Field(None, description="A string that uniquely identifies this bookmark")
    url: str = Field(description="The url of the bookmarked item", json_schema_extra={"format": "uri"})
    title: str | None = Field(None, description="Title, headline, or short description")
    tags: list[str] = Field([], description="Array of strings; use tags like labels")
    created_at: str | None = Field(
        None, alias="createdAt", description="DateTime string of document creation",
        json_schema_extra={"format": "date-time"},
    )
    updated_at: str | None = Field(
        None, alias="updatedAt", description="DateTime string of last update",
        json_schema_extra={"format": "date-time"},
    )

    @classmethod
    def shape(cls) -> dict[str, Any]:
        return cls.model_json_schema(by_alias=True)


class ArchiveBookmark(BookmarkBase):
    """An archived bookmark."""

    variant = ARCHIVE
    required_fields = ("id", "url", "title")

    title: str = Field(description="Title, headline, or short description")
    description: str = Field("", description="A longer description of the bookmarked item")
    thumbnail: str | None = Field(None, description="A base64-encoded screenshot of the bookmarked page")


class BrowserBookmark(BookmarkBase):
    """A bookmark that is not archived."""

    variant = BROWSER
    required_fields = ("id", "url", "title")

    title: str = Field(description="Title, headline, or short description")


class ReadLaterBookmark(BookmarkBase):
    """A bookmark the user marked for reading later."""

    variant = READLATER
    required_fields = ("id", "url", "unread")

    unread: bool = Field(True, description="Whether the bookmark is unread")
