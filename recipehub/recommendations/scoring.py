from __future__ import annotations

from typing import Mapping

from ..recipes.models import Recipe
from .models import PreferenceProfile

SCORING_WEIGHTS: dict[str, float] = {
    "cuisine": 0.4,
    "category": 0.3,
    "rating": 0.2,
    "popularity": 0.1,
}

SIMILARITY_WEIGHTS: dict[str, float] = {
    "cuisine": 0.4,
    "category": 0.3,
    "difficulty": 0.15,
    "time": 0.15,
}

_COOK_COUNT_SCALE = 1000


def popularity_score(recipe: Recipe) -> float:
    """Community signal from rating and cook count, capped at the popularity weight."""
    raw = (recipe.average_rating / 5.0) * 0.05 + (recipe.cook_count / _COOK_COUNT_SCALE) * 0.05
    return min(SCORING_WEIGHTS["popularity"], raw)


def score_recipe(
    recipe: Recipe,
    profile: PreferenceProfile,
    history_length: int,
    ratings: Mapping[str, float] | None = None,
) -> float:
    """Weighted relevance of *recipe* for a user.

    The four weights are applied independently and are not normalised, so
    a score can exceed 1.0.
    """
    w = SCORING_WEIGHTS
    score = 0.0

    if history_length > 0:
        cuisine_count = profile.cuisine_counts.get(recipe.cuisine, 0)
        category_count = profile.category_counts.get(recipe.category, 0)
        score += (cuisine_count / history_length) * w["cuisine"]
        score += (category_count / history_length) * w["category"]

    user_rating = (ratings or {}).get(recipe.id)
    if user_rating:
        score += (user_rating / 5.0) * w["rating"]

    score += popularity_score(recipe)
    return score


def recipe_similarity(a: Recipe, b: Recipe) -> float:
    """Weighted match on cuisine, category, difficulty and cooking time."""
    w = SIMILARITY_WEIGHTS
    similarity = 0.0
    if a.cuisine == b.cuisine:
        similarity += w["cuisine"]
    if a.category == b.category:
        similarity += w["category"]
    if a.difficulty == b.difficulty:
        similarity += w["difficulty"]

    max_time = max(a.cooking_time, b.cooking_time)
    if max_time > 0:
        time_diff = abs(a.cooking_time - b.cooking_time)
        similarity += (1 - time_diff / max_time) * w["time"]
    return similarity
