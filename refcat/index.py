"""Category index — groups catalog entries by their top-level category."""

from __future__ import annotations

from typing import Optional

from refcat.models import Catalog, Category, CategoryGroup, Entry, Kind


class CategoryIndex:
    """Read-only grouping of a catalog by category.

    Groups are ordered by the first appearance of their category in the
    catalog; entries keep catalog order within each group.
    """

    def __init__(self, catalog: Catalog) -> None:
        buckets: dict[Category, list[Entry]] = {}
        for entry in catalog.entries:
            buckets.setdefault(entry.category, []).append(entry)
        self._groups = tuple(
            CategoryGroup(category=category, entries=tuple(entries))
            for category, entries in buckets.items()
        )
        self._by_category = {g.category: g for g in self._groups}

    def list_categories(self, kind: Optional[Kind] = None) -> tuple[CategoryGroup, ...]:
        """Non-empty categories in order of first appearance."""
        if kind is None:
            return self._groups
        return tuple(g for g in self._groups if g.category.kind is kind)

    def entries_for(self, category: Category | str) -> tuple[Entry, ...]:
        """Entries of one category, in catalog order.

        Accepts a Category or a display name / slug.  A known category with
        no entries yields an empty tuple.

        Raises:
            UnknownCategoryError: if the name is outside the fixed set.
        """
        group = self._by_category.get(Category.parse(category))
        return group.entries if group else ()
