"""Lookup service tests: id lookup and ranked keyword search."""

import types

import pytest

from refcat.errors import NotFoundError, UnknownCategoryError
from refcat.lookup import LookupService


# ===========================================================================
# find_by_id / get
# ===========================================================================

def test_find_by_id_round_trip(builtin):
    """Every loaded entry is returned by its own id."""
    service = LookupService(builtin)
    for entry in builtin:
        assert service.find_by_id(entry.id) is entry


def test_find_by_id_trims_and_ignores_case(builtin):
    service = LookupService(builtin)
    assert service.find_by_id("  Extract-Method ").id == "extract-method"


def test_find_by_id_missing(builtin):
    with pytest.raises(NotFoundError) as exc:
        LookupService(builtin).find_by_id("extract-everything")
    assert exc.value.entry_id == "extract-everything"


def test_get_missing_returns_none(builtin):
    assert LookupService(builtin).get("nope") is None


# ===========================================================================
# search
# ===========================================================================

def test_search_exact_title_ranks_first(builtin):
    results = list(LookupService(builtin).search("Extract Method"))
    assert results[0].id == "extract-method"


def test_search_is_lazy(builtin):
    result = LookupService(builtin).search("method")
    assert isinstance(result, types.GeneratorType)


def test_search_ranking_title_then_summary_then_order(small_catalog):
    """Title hits beat summary hits; equal counts keep catalog order."""
    ids = [e.id for e in LookupService(small_catalog).search("foo")]
    assert ids == ["just-foo", "foo-bar", "alpha", "zeta"]


def test_search_hits_expose_counts(small_catalog):
    hits = list(LookupService(small_catalog).search_hits("FOO"))
    first = hits[0]
    assert (first.entry.id, first.title_matches, first.summary_matches) == ("just-foo", 1, 1)
    assert hits[-1].summary_matches == 2


def test_search_drops_non_matching(builtin):
    ids = [e.id for e in LookupService(builtin).search("polymorphism")]
    assert ids == ["replace-conditional-with-polymorphism"]


def test_search_no_results_is_empty(builtin):
    assert list(LookupService(builtin).search("kubernetes")) == []


@pytest.mark.parametrize("keyword", ["", "   "])
def test_search_blank_keyword(builtin, keyword):
    assert list(LookupService(builtin).search(keyword)) == []


def test_search_category_filter(builtin):
    results = list(LookupService(builtin).search("class", category="couplers"))
    assert results
    assert all(e.category.slug == "couplers" for e in results)


def test_search_unknown_category_raises_on_iteration(builtin):
    result = LookupService(builtin).search("class", category="nope")
    with pytest.raises(UnknownCategoryError):
        next(result)


def test_search_blank_keyword_unknown_category_still_raises(builtin):
    """The category is validated even when the keyword matches nothing."""
    with pytest.raises(UnknownCategoryError):
        list(LookupService(builtin).search("  ", category="nope"))
