from __future__ import annotations

import logging
import random

from ..data_ingestion.ingest import load_recipes
from .models import Recipe

logger = logging.getLogger(__name__)

_recipes: dict[str, Recipe] | None = None


def _load() -> dict[str, Recipe]:
    return {recipe.id: recipe for recipe in load_recipes()}


def _store() -> dict[str, Recipe]:
    global _recipes
    if _recipes is None:
        _recipes = _load()
    return _recipes


def get_recipes() -> list[Recipe]:
    """Return every recipe in seed order, loading the seed on first call."""
    return list(_store().values())


def get_approved_recipes() -> list[Recipe]:
    return [r for r in _store().values() if r.approved]


def get_recipe(recipe_id: str) -> Recipe | None:
    return _store().get(recipe_id)


def increment_cook_count(recipe_id: str) -> Recipe | None:
    store = _store()
    recipe = store.get(recipe_id)
    if recipe is None:
        return None
    updated = recipe.model_copy(update={"cook_count": recipe.cook_count + 1})
    store[recipe_id] = updated
    return updated


def update_rating(recipe_id: str, ratings: list[int]) -> Recipe | None:
    """Recompute ``average_rating`` and ``num_reviews`` from *ratings*."""
    store = _store()
    recipe = store.get(recipe_id)
    if recipe is None:
        return None
    if ratings:
        average = sum(ratings) / len(ratings)
    else:
        average = 0.0
    updated = recipe.model_copy(
        update={"average_rating": average, "num_reviews": len(ratings)},
    )
    store[recipe_id] = updated
    return updated


def search_by_ingredients(terms: list[str]) -> list[Recipe]:
    """Approved recipes with at least one ingredient name containing a term."""
    needles = [t.strip().lower() for t in terms if t.strip()]
    return [
        r for r in get_approved_recipes()
        if any(n in i.name.lower() for i in r.ingredients for n in needles)
    ]


def sample_approved(size: int) -> list[Recipe]:
    """Random sample of approved recipes (without replacement)."""
    approved = get_approved_recipes()
    return random.sample(approved, min(size, len(approved)))


def reset_recipes() -> None:
    """Drop in-memory changes and reload the seed collection."""
    global _recipes
    _recipes = _load()
    logger.info("Recipe store reset with %d recipes", len(_recipes))
