"""Data models for the refcat catalog.

Kind and Category enums, Entry, CategoryGroup, Catalog — the immutable
structures that flow through loader → index/lookup → CLI.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from refcat.errors import UnknownCategoryError


class Kind(str, Enum):
    """What an entry describes."""

    TECHNIQUE = "technique"
    SMELL = "smell"

    @property
    def plural(self) -> str:
        return f"{self.value}s"


class Category(str, Enum):
    """Top-level groupings, declared in index document order."""

    COMPOSING_METHODS = "Composing Methods"
    MOVING_FEATURES = "Moving Features between Objects"
    ORGANIZING_DATA = "Organizing Data"
    SIMPLIFYING_CONDITIONALS = "Simplifying Conditional Expressions"
    SIMPLIFYING_METHOD_CALLS = "Simplifying Method Calls"
    DEALING_WITH_GENERALIZATION = "Dealing with Generalization"

    BLOATERS = "Bloaters"
    OO_ABUSERS = "Object-Orientation Abusers"
    CHANGE_PREVENTERS = "Change Preventers"
    DISPENSABLES = "Dispensables"
    COUPLERS = "Couplers"

    @property
    def slug(self) -> str:
        """'Moving Features between Objects' → 'moving-features-between-objects'."""
        return slugify(self.value)

    @property
    def kind(self) -> Kind:
        return Kind.SMELL if self in _SMELL_CATEGORIES else Kind.TECHNIQUE

    @classmethod
    def parse(cls, text: str | Category) -> Category:
        """Resolve a display name or slug, ignoring case and outer whitespace.

        Raises:
            UnknownCategoryError: if nothing in the closed set matches.
        """
        if isinstance(text, cls):
            return text
        wanted = str(text).strip().lower()
        for category in cls:
            if wanted in (category.value.lower(), category.slug):
                return category
        raise UnknownCategoryError(str(text))


ALL_CATEGORIES = list(Category)

_SMELL_CATEGORIES = frozenset({
    Category.BLOATERS,
    Category.OO_ABUSERS,
    Category.CHANGE_PREVENTERS,
    Category.DISPENSABLES,
    Category.COUPLERS,
})

_SLUG_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def slugify(text: str) -> str:
    """Lowercase, collapse every non-alphanumeric run into a single dash."""
    return re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")


def is_slug(text: str) -> bool:
    return bool(_SLUG_RE.match(text))


@dataclass(frozen=True)
class Entry:
    """One technique or smell."""

    id: str
    title: str
    category: Category
    summary: str
    reference_path: str

    @property
    def kind(self) -> Kind:
        return self.category.kind


@dataclass(frozen=True)
class CategoryGroup:
    """A category with its entries in catalog order."""

    category: Category
    entries: tuple[Entry, ...]

    @property
    def name(self) -> str:
        return self.category.value

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class Catalog:
    """Validated entries in load order, plus where they came from."""

    entries: tuple[Entry, ...]
    source: str = "builtin"

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def count(self, kind: Kind) -> int:
        return sum(1 for e in self.entries if e.kind is kind)
