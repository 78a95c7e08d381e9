"""Model tests: category parsing and immutability of loaded data."""

import dataclasses

import pytest

from refcat.errors import UnknownCategoryError
from refcat.index import CategoryIndex
from refcat.models import Category, Kind, slugify


def test_category_slug_and_kind():
    assert Category.MOVING_FEATURES.slug == "moving-features-between-objects"
    assert Category.OO_ABUSERS.slug == "object-orientation-abusers"
    assert Category.COMPOSING_METHODS.kind is Kind.TECHNIQUE
    assert Category.COUPLERS.kind is Kind.SMELL


def test_category_parse_unknown():
    with pytest.raises(UnknownCategoryError):
        Category.parse("Refactoring")


def test_slugify():
    assert slugify("Replace Type Code with State/Strategy") == "replace-type-code-with-state-strategy"


# ===========================================================================
# Immutability
# ===========================================================================

def test_entry_is_frozen(builtin):
    entry = builtin.entries[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.title = "Changed"
    assert entry.title == "Extract Method"


def test_catalog_is_frozen(builtin):
    with pytest.raises(dataclasses.FrozenInstanceError):
        builtin.entries = ()
    assert isinstance(builtin.entries, tuple)
    assert len(builtin) == 89


def test_category_group_is_frozen(builtin):
    group = CategoryIndex(builtin).list_categories()[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        group.entries = ()


def test_list_categories_returns_tuples_of_tuples(builtin):
    groups = CategoryIndex(builtin).list_categories()
    assert isinstance(groups, tuple)
    assert all(isinstance(g.entries, tuple) for g in groups)
    assert isinstance(CategoryIndex(builtin).entries_for("bloaters"), tuple)
