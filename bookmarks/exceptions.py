from __future__ import annotations


class BookmarksError(Exception):
    """Base class for errors raised by this package."""


class UnknownVariantError(BookmarksError, KeyError):
    """A variant tag was used that was never declared."""

    def __init__(self, tag: str):
        super().__init__(tag)
        self.tag = tag

    def __str__(self) -> str:
        return f"unknown bookmark variant: {self.tag!r}"


class SchemaViolationError(BookmarksError, ValueError):
    """Raised by a typed write when the record does not match its declared shape."""

    def __init__(self, tag: str, errors: list[str]):
        super().__init__(tag, errors)
        self.tag = tag
        self.errors = errors

    def __str__(self) -> str:
        return f"{self.tag}: " + " | ".join(self.errors)
