from __future__ import annotations

import pytest

from recipehub.grocery.categorizer import categorize
from recipehub.grocery.models import GroceryCategory


def test_meat():
    assert categorize("Chicken breast") == GroceryCategory.meat


def test_produce():
    assert categorize("Tomato") == GroceryCategory.produce


def test_unknown_defaults_to_pantry():
    assert categorize("Unknown Item") == GroceryCategory.pantry


def test_case_insensitive():
    assert categorize("GARLIC CLOVES") == GroceryCategory.produce
    assert categorize("whole MILK") == GroceryCategory.dairy


@pytest.mark.parametrize(
    "name, expected",
    [
        # produce is checked before dairy
        ("Pepper jack cheese", GroceryCategory.produce),
        # dairy is checked before meat
        ("Cream of chicken", GroceryCategory.dairy),
        # meat is checked before beverages
        ("Fish stock water", GroceryCategory.meat),
        ("Green tea", GroceryCategory.beverages),
    ],
)
def test_priority_order(name, expected):
    assert categorize(name) == expected


def test_empty_name():
    assert categorize("") == GroceryCategory.pantry
