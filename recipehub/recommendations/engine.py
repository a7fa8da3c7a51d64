from __future__ import annotations

import logging
from typing import Mapping, NamedTuple, Sequence

from ..errors import InvalidInputError
from ..recipes.models import Category, Cuisine, Recipe
from .models import CookingHistoryEntry, Season
from .preferences import build_profile
from .scoring import recipe_similarity, score_recipe

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 18
DEFAULT_SIMILAR_LIMIT = 10

SEASONAL_CATEGORIES: dict[Season, tuple[Category, ...]] = {
    Season.winter: (Category.soup, Category.main_course, Category.dessert),
    Season.summer: (Category.salad, Category.beverage, Category.snack),
    Season.spring: (Category.salad, Category.appetizer, Category.beverage),
    Season.autumn: (Category.soup, Category.main_course, Category.dessert),
}


class ScoredRecipe(NamedTuple):
    recipe: Recipe
    score: float


def _check_limit(limit: int) -> None:
    if limit < 0:
        raise InvalidInputError(f"limit must be >= 0, got {limit}")


def _approved(candidates: Sequence[Recipe]) -> list[Recipe]:
    return [r for r in candidates if r.approved]


def popular_fallback(candidates: Sequence[Recipe], limit: int = DEFAULT_LIMIT) -> list[Recipe]:
    """Approved candidates by cook count, then average rating (both descending)."""
    _check_limit(limit)
    ranked = sorted(
        _approved(candidates),
        key=lambda r: (-r.cook_count, -r.average_rating),
    )
    return ranked[:limit]


def ranked_recommendations(
    history: Sequence[CookingHistoryEntry],
    candidates: Sequence[Recipe],
    ratings: Mapping[str, float] | None = None,
    limit: int = DEFAULT_LIMIT,
) -> list[ScoredRecipe]:
    """Score approved candidates against the user's history.

    Equal scores keep the candidates' input order. Returns an empty list
    when there is no history; callers use :func:`popular_fallback` then.
    """
    _check_limit(limit)
    if not history:
        return []

    profile = build_profile(history)
    scored = [
        ScoredRecipe(r, score_recipe(r, profile, len(history), ratings))
        for r in _approved(candidates)
    ]
    scored.sort(key=lambda s: -s.score)
    return scored[:limit]


def recommend(
    history: Sequence[CookingHistoryEntry],
    candidates: Sequence[Recipe],
    ratings: Mapping[str, float] | None = None,
    limit: int = DEFAULT_LIMIT,
) -> list[Recipe]:
    """Personalised ranking, or the popularity fallback for an empty history."""
    if not history:
        logger.debug("Empty cooking history, using popularity fallback")
        return popular_fallback(candidates, limit)
    return [s.recipe for s in ranked_recommendations(history, candidates, ratings, limit)]


def ranked_similar(
    reference: Recipe,
    candidates: Sequence[Recipe],
    limit: int = DEFAULT_SIMILAR_LIMIT,
) -> list[ScoredRecipe]:
    _check_limit(limit)
    scored = [
        ScoredRecipe(r, recipe_similarity(reference, r))
        for r in _approved(candidates)
        if r.id != reference.id
    ]
    scored.sort(key=lambda s: -s.score)
    return scored[:limit]


def find_similar(
    reference: Recipe,
    candidates: Sequence[Recipe],
    limit: int = DEFAULT_SIMILAR_LIMIT,
) -> list[Recipe]:
    """Approved candidates most similar to *reference*, excluding itself."""
    return [s.recipe for s in ranked_similar(reference, candidates, limit)]


def trending(candidates: Sequence[Recipe], limit: int = DEFAULT_LIMIT) -> list[Recipe]:
    """Approved candidates by ``cook_count + average_rating * 10``."""
    _check_limit(limit)
    ranked = sorted(
        _approved(candidates),
        key=lambda r: -(r.cook_count + r.average_rating * 10),
    )
    return ranked[:limit]


def seasonal(
    candidates: Sequence[Recipe],
    season: Season | str,
    limit: int = DEFAULT_LIMIT,
) -> list[Recipe]:
    """Approved recipes in the season's categories or named after the season.

    An unrecognised season only matches on the recipe name.
    """
    _check_limit(limit)
    token = season.value if isinstance(season, Season) else str(season).strip().lower()
    try:
        categories = SEASONAL_CATEGORIES[Season(token)]
    except ValueError:
        categories = ()

    matches = [
        r for r in _approved(candidates)
        if r.category in categories or token in r.name.lower()
    ]
    matches.sort(key=lambda r: -r.average_rating)
    return matches[:limit]


def by_category(
    history: Sequence[CookingHistoryEntry],
    candidates: Sequence[Recipe],
    category: Category,
    limit: int = DEFAULT_LIMIT,
) -> list[Recipe]:
    """Approved recipes of *category*, the user's most cooked cuisines first."""
    _check_limit(limit)
    matches = [r for r in _approved(candidates) if r.category == category]
    if history:
        counts = build_profile(history).cuisine_counts
        matches.sort(key=lambda r: -counts.get(r.cuisine, 0))
    return matches[:limit]


def by_cuisine(
    history: Sequence[CookingHistoryEntry],
    candidates: Sequence[Recipe],
    cuisine: Cuisine,
    limit: int = DEFAULT_LIMIT,
) -> list[Recipe]:
    """Approved recipes of *cuisine*, the user's most cooked categories first."""
    _check_limit(limit)
    matches = [r for r in _approved(candidates) if r.cuisine == cuisine]
    if history:
        counts = build_profile(history).category_counts
        matches.sort(key=lambda r: -counts.get(r.category, 0))
    return matches[:limit]
