"""Exceptions raised while building or querying the catalog."""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for every refcat error."""


class ValidationError(CatalogError):
    """A record could not be turned into a catalog entry."""


class DuplicateIdError(ValidationError):
    """Two records share the same id."""

    def __init__(self, entry_id: str, first: str, second: str) -> None:
        self.entry_id = entry_id
        self.first = first
        self.second = second
        super().__init__(
            f"Duplicate id {entry_id!r}: {first!r} and {second!r}"
        )


class UnknownCategoryError(ValidationError):
    """A category name outside the fixed set."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown category: {name!r}")


class NotFoundError(CatalogError):
    """No entry with the requested id."""

    def __init__(self, entry_id: str) -> None:
        self.entry_id = entry_id
        super().__init__(f"Entry not found: {entry_id!r}")


class ContentDirError(CatalogError):
    """The content directory is missing or unreadable."""
