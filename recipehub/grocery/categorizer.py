from __future__ import annotations

from .models import GroceryCategory

# Checked in order; the first list with a matching keyword wins.
CATEGORY_KEYWORDS: list[tuple[GroceryCategory, tuple[str, ...]]] = [
    (
        GroceryCategory.produce,
        (
            "apple", "banana", "orange", "tomato", "lettuce", "onion",
            "garlic", "carrot", "potato", "broccoli", "spinach", "pepper",
        ),
    ),
    (GroceryCategory.dairy, ("milk", "cheese", "butter", "yogurt", "cream")),
    (GroceryCategory.meat, ("chicken", "beef", "pork", "fish", "shrimp", "lamb")),
    (GroceryCategory.beverages, ("water", "juice", "coffee", "tea", "wine", "beer")),
]


def categorize(ingredient_name: str) -> GroceryCategory:
    """Return the grocery aisle for *ingredient_name*, defaulting to Pantry."""
    name = ingredient_name.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in name for keyword in keywords):
            return category
    return GroceryCategory.pantry
