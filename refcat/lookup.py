"""Lookup service — exact id lookup and ranked keyword search.

Search is a plain linear scan: the corpus is small and fixed, so there is
no inverted index.  Matches are counted as case-insensitive, non-overlapping
substring occurrences; title hits outrank summary hits and ties keep
catalog order.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

from refcat.errors import NotFoundError
from refcat.models import Catalog, Category, Entry


@dataclass(frozen=True)
class SearchHit:
    """A matching entry with its per-field match counts."""

    entry: Entry
    title_matches: int
    summary_matches: int
    position: int

    @property
    def rank_key(self) -> tuple[int, int, int]:
        return (-self.title_matches, -self.summary_matches, self.position)


class LookupService:
    """Queries over an immutable catalog."""

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog
        self._by_id = {e.id: e for e in catalog.entries}

    def get(self, entry_id: str) -> Optional[Entry]:
        """Entry for an id, or None.  Ids are trimmed and lowercased first."""
        return self._by_id.get(entry_id.strip().lower())

    def find_by_id(self, entry_id: str) -> Entry:
        """Entry for an id.

        Raises:
            NotFoundError: if no entry has that id.
        """
        entry = self.get(entry_id)
        if entry is None:
            raise NotFoundError(entry_id)
        return entry

    def search_hits(self, keyword: str, category: Category | str | None = None) -> Iterator[SearchHit]:
        """Ranked hits for keyword; nothing is scanned until first iteration."""
        wanted = Category.parse(category) if category is not None else None
        needle = keyword.strip().lower()
        if not needle:
            return

        hits: list[SearchHit] = []
        for position, entry in enumerate(self._catalog.entries):
            if wanted is not None and entry.category is not wanted:
                continue
            in_title = entry.title.lower().count(needle)
            in_summary = entry.summary.lower().count(needle)
            if in_title or in_summary:
                hits.append(SearchHit(entry, in_title, in_summary, position))

        hits.sort(key=lambda h: h.rank_key)
        yield from hits

    def search(self, keyword: str, category: Category | str | None = None) -> Iterator[Entry]:
        """Entries matching keyword, best first.  Blank keywords match nothing."""
        for hit in self.search_hits(keyword, category):
            yield hit.entry
