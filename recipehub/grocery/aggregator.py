from __future__ import annotations

import logging
import re
from typing import Sequence

from ..meal_plans.models import PlannedMeal
from .categorizer import categorize
from .models import GroceryListItem

logger = logging.getLogger(__name__)

# Leading decimal number, the way a browser's parseFloat reads "1.5 cups"
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_quantity(quantity: str | None) -> float:
    """Best-effort numeric value of a text quantity; unparsable text is 0."""
    if not quantity:
        return 0.0
    match = _LEADING_NUMBER.match(quantity)
    if not match:
        return 0.0
    return float(match.group(1))


def format_quantity(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


def merge_key(name: str, unit: str) -> str:
    return f"{name}-{unit}".lower()


def aggregate(meal_plans: Sequence[PlannedMeal]) -> list[GroceryListItem]:
    """
    Merge the ingredients of every planned recipe into shopping-list items.

    Lines sharing a lowercased name and unit are summed. A line whose unit
    only differs by letter case from an earlier one is kept as its own item.
    Items come out in the order their key was first seen.
    """
    merged: dict[tuple[str, int], GroceryListItem] = {}
    extra_lines = 0

    for planned in meal_plans:
        recipe = planned.recipe
        if recipe is None or not recipe.ingredients:
            continue
        for ingredient in recipe.ingredients:
            key = merge_key(ingredient.name, ingredient.unit)
            existing = merged.get((key, 0))

            if existing is not None and existing.unit == ingredient.unit:
                total = parse_quantity(existing.quantity) + parse_quantity(ingredient.quantity)
                merged[(key, 0)] = existing.model_copy(
                    update={"quantity": format_quantity(total)},
                )
                continue

            if existing is None:
                slot = (key, 0)
            else:
                extra_lines += 1
                slot = (key, extra_lines)

            merged[slot] = GroceryListItem(
                name=ingredient.name,
                quantity=ingredient.quantity,
                unit=ingredient.unit,
                category=categorize(ingredient.name),
                purchased=False,
                recipe_id=recipe.id,
            )

    items = list(merged.values())
    logger.debug("Aggregated %d planned meals into %d items", len(meal_plans), len(items))
    return items
