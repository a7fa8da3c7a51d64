from __future__ import annotations

import logging
from typing import List

import pandas as pd
from pydantic import ValidationError

from ..recipes.models import Ingredient, Recipe
from .config import DEFAULT_INGESTION_CONFIG, IngestionConfig

logger = logging.getLogger(__name__)

RECIPE_COLUMNS: List[str] = [
    "id",
    "name",
    "description",
    "cuisine",
    "category",
    "difficulty",
    "cooking_time",
    "servings",
    "calories",
    "average_rating",
    "num_reviews",
    "cook_count",
    "approved",
]

INGREDIENT_COLUMNS: List[str] = ["recipe_id", "position", "name", "quantity", "unit"]


def _parse_bool(value: object) -> bool:
    return str(value).strip().lower() in ("true", "1", "yes")


def _group_ingredients(df: pd.DataFrame) -> dict[str, list[Ingredient]]:
    grouped: dict[str, list[Ingredient]] = {}
    if df.empty:
        return grouped
    df = df.assign(position=pd.to_numeric(df["position"], errors="coerce").fillna(0))
    # Stable sort keeps file order for equal positions
    df = df.sort_values(["recipe_id", "position"], kind="mergesort")
    for recipe_id, rows in df.groupby("recipe_id", sort=False):
        grouped[str(recipe_id)] = [
            Ingredient(
                name=row["name"].strip(),
                quantity=row["quantity"].strip(),
                unit=row["unit"].strip(),
            )
            for _, row in rows.iterrows()
            if row["name"].strip()
        ]
    return grouped


def load_recipes(config: IngestionConfig = DEFAULT_INGESTION_CONFIG) -> list[Recipe]:
    """
    Load the seed recipes with their ingredient lists.

    Rows that fail validation are logged and skipped; a missing
    ingredients file yields recipes without ingredients.
    """
    recipes_df = pd.read_csv(config.recipes_path, dtype=str, keep_default_na=False)
    missing = [c for c in RECIPE_COLUMNS if c not in recipes_df.columns]
    if missing:
        raise ValueError(f"Seed recipes file is missing columns: {missing}")

    if config.ingredients_path.is_file():
        ingredients_df = pd.read_csv(config.ingredients_path, dtype=str, keep_default_na=False)
        ingredients_df = ingredients_df.reindex(columns=INGREDIENT_COLUMNS, fill_value="")
    else:
        logger.warning("No ingredients file at %s", config.ingredients_path)
        ingredients_df = pd.DataFrame(columns=INGREDIENT_COLUMNS)

    ingredients_by_recipe = _group_ingredients(ingredients_df)

    recipes: list[Recipe] = []
    for _, row in recipes_df[RECIPE_COLUMNS].iterrows():
        data = {col: row[col].strip() for col in RECIPE_COLUMNS}
        data["approved"] = _parse_bool(data["approved"])
        try:
            recipe = Recipe(
                **data,
                ingredients=ingredients_by_recipe.get(data["id"], []),
            )
        except ValidationError as exc:
            logger.warning("Skipping seed recipe %r: %s", data.get("id"), exc)
            continue
        recipes.append(recipe)

    logger.info("Loaded %d seed recipes from %s", len(recipes), config.recipes_path)
    return recipes
