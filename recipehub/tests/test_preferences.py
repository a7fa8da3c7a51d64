from __future__ import annotations

from recipehub.recipes.models import Category, Cuisine
from recipehub.recommendations.preferences import build_profile

from ._factories import make_entry


def test_empty_history():
    profile = build_profile([])
    assert profile.cuisine_counts == {}
    assert profile.category_counts == {}
    assert profile.history_length == 0


def test_counts_cuisines_and_categories():
    profile = build_profile([
        make_entry("1", "Italian", "Main Course"),
        make_entry("2", "Italian", "Dessert"),
        make_entry("3", "Thai", "Main Course"),
    ])
    assert profile.cuisine_counts == {Cuisine.italian: 2, Cuisine.thai: 1}
    assert profile.category_counts == {Category.main_course: 2, Category.dessert: 1}
    assert profile.history_length == 3


def test_missing_fields_are_excluded_from_their_count():
    profile = build_profile([
        make_entry("1", None, "Soup"),
        make_entry("2", "Greek", None),
    ])
    assert profile.cuisine_counts == {Cuisine.greek: 1}
    assert profile.category_counts == {Category.soup: 1}
    assert profile.history_length == 2


def test_mapping_order_follows_enum_declaration():
    profile = build_profile([
        make_entry("1", "Other", "Breakfast"),
        make_entry("2", "Italian", "Appetizer"),
    ])
    assert list(profile.cuisine_counts) == [Cuisine.italian, Cuisine.other]
    assert list(profile.category_counts) == [Category.appetizer, Category.breakfast]


def test_top_cuisines_ranked_by_count_then_declaration():
    profile = build_profile([
        make_entry("1", "Thai"),
        make_entry("2", "Mexican"),
        make_entry("3", "Thai"),
        make_entry("4", "Italian"),
    ])
    assert profile.top_cuisines() == [Cuisine.thai, Cuisine.italian, Cuisine.mexican]
    assert profile.top_cuisines(1) == [Cuisine.thai]
    assert profile.top_categories() == [Category.main_course]
