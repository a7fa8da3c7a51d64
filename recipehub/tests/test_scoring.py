from __future__ import annotations

import pytest

from recipehub.recommendations.models import PreferenceProfile
from recipehub.recommendations.preferences import build_profile
from recipehub.recommendations.scoring import popularity_score, recipe_similarity, score_recipe
from recipehub.recipes.models import Cuisine

from ._factories import make_entry, make_recipe


def test_weighted_sum():
    recipe = make_recipe("r", cuisine="Italian", category="Main Course", average_rating=4.0, cook_count=100)
    profile = build_profile([
        make_entry("1", "Italian", "Dessert"),
        make_entry("2", "Italian", "Soup"),
        make_entry("3", "Thai", "Main Course"),
        make_entry("4", "Thai", "Soup"),
    ])
    score = score_recipe(recipe, profile, 4, {"r": 4})
    # 2/4*0.4 + 1/4*0.3 + 4/5*0.2 + (4/5*0.05 + 100/1000*0.05)
    assert score == pytest.approx(0.2 + 0.075 + 0.16 + 0.045)


def test_zero_history_length_only_popularity():
    recipe = make_recipe("r", average_rating=5.0, cook_count=0)
    profile = PreferenceProfile(cuisine_counts={Cuisine.italian: 3})
    assert score_recipe(recipe, profile, 0) == pytest.approx(0.05)


def test_unrated_recipe_gets_no_rating_contribution():
    recipe = make_recipe("r")
    profile = build_profile([make_entry("1", "Thai", "Soup")])
    assert score_recipe(recipe, profile, 1, {"other": 5}) == 0.0


def test_popularity_is_capped():
    recipe = make_recipe("r", average_rating=5.0, cook_count=50_000)
    assert popularity_score(recipe) == 0.1


def test_score_can_exceed_one():
    recipe = make_recipe("r", average_rating=5.0, cook_count=5000)
    profile = build_profile([make_entry("1")])
    assert score_recipe(recipe, profile, 1, {"r": 5}) == pytest.approx(1.0)
    profile = PreferenceProfile(cuisine_counts={Cuisine.italian: 2})
    assert score_recipe(recipe, profile, 1, {"r": 5}) > 1.0


def test_monotonic_in_cuisine_count():
    recipe = make_recipe("r", average_rating=3.0, cook_count=20)
    scores = [
        score_recipe(recipe, PreferenceProfile(cuisine_counts={Cuisine.italian: n}), 10)
        for n in range(11)
    ]
    assert scores == sorted(scores)


def test_similarity_with_identical_clone_is_one():
    recipe = make_recipe("a", cooking_time=45)
    clone = recipe.model_copy(update={"id": "b"})
    assert recipe_similarity(recipe, clone) == pytest.approx(1.0)


def test_similarity_time_closeness():
    a = make_recipe("a", cooking_time=30)
    b = make_recipe("b", cooking_time=60, cuisine="Thai", category="Soup", difficulty="Hard")
    assert recipe_similarity(a, b) == pytest.approx(0.5 * 0.15)


def test_similarity_both_times_zero():
    a = make_recipe("a", cooking_time=0)
    b = make_recipe("b", cooking_time=0)
    assert recipe_similarity(a, b) == pytest.approx(0.85)
