from __future__ import annotations

import datetime as dt

from recipehub.grocery.aggregator import aggregate, format_quantity, parse_quantity
from recipehub.grocery.models import GroceryCategory
from recipehub.meal_plans.models import MealPlan, MealType, PlannedMeal
from recipehub.recipes.models import Ingredient, Recipe


def _recipe(recipe_id: str, *ingredients: tuple[str, str, str]) -> Recipe:
    return Recipe(
        id=recipe_id,
        name=f"Recipe {recipe_id}",
        cuisine="Italian",
        category="Main Course",
        difficulty="Easy",
        approved=True,
        ingredients=[Ingredient(name=n, quantity=q, unit=u) for n, q, u in ingredients],
    )


def _planned(recipe: Recipe | None) -> PlannedMeal:
    plan = MealPlan(
        id="plan",
        user="user",
        recipe_id=recipe.id if recipe else "missing",
        date=dt.date(2024, 1, 2),
        meal_type=MealType.dinner,
    )
    return PlannedMeal(meal_plan=plan, recipe=recipe)


def test_empty_input():
    assert aggregate([]) == []


def test_same_name_and_unit_are_summed():
    items = aggregate([
        _planned(_recipe("a", ("Salt", "1", "tsp"))),
        _planned(_recipe("b", ("Salt", "2", "tsp"))),
    ])
    assert len(items) == 1
    assert (items[0].name, items[0].quantity, items[0].unit) == ("Salt", "3", "tsp")


def test_no_collisions_keeps_every_line():
    recipe = _recipe(
        "a",
        ("Tomato", "2", "pieces"),
        ("Basil", "5", "leaves"),
        ("Olive oil", "1", "tbsp"),
    )
    other = _recipe("b", ("Flour", "200", "g"), ("Tomato", "100", "g"))
    items = aggregate([_planned(recipe), _planned(other)])
    assert len(items) == 5


def test_name_match_is_case_insensitive():
    items = aggregate([
        _planned(_recipe("a", ("salt", "1", "tsp"))),
        _planned(_recipe("b", ("Salt", "1", "tsp"))),
    ])
    assert len(items) == 1
    assert items[0].name == "salt"
    assert items[0].quantity == "2"


def test_unit_differing_in_case_is_kept_separate():
    items = aggregate([
        _planned(_recipe("a", ("Milk", "1", "Cup"))),
        _planned(_recipe("b", ("Milk", "2", "cup"))),
        _planned(_recipe("c", ("Milk", "3", "CUP"))),
    ])
    assert [(i.quantity, i.unit) for i in items] == [("1", "Cup"), ("2", "cup"), ("3", "CUP")]


def test_different_units_are_not_merged():
    items = aggregate([
        _planned(_recipe("a", ("Butter", "50", "g"))),
        _planned(_recipe("b", ("Butter", "2", "tbsp"))),
    ])
    assert len(items) == 2


def test_unparsable_quantity_counts_as_zero():
    items = aggregate([
        _planned(_recipe("a", ("Salt", "to taste", ""))),
        _planned(_recipe("b", ("Salt", "2", ""))),
    ])
    assert items[0].quantity == "2"


def test_fractional_quantities():
    items = aggregate([
        _planned(_recipe("a", ("Sugar", "1.5", "cup"))),
        _planned(_recipe("b", ("Sugar", "0.25", "cup"))),
    ])
    assert items[0].quantity == "1.75"


def test_new_items_are_categorized_and_unpurchased():
    items = aggregate([_planned(_recipe("a", ("Chicken breast", "500", "g"), ("Rice", "1", "cup")))])
    assert items[0].category == GroceryCategory.meat
    assert items[1].category == GroceryCategory.pantry
    assert all(not i.purchased for i in items)
    assert {i.recipe_id for i in items} == {"a"}


def test_first_seen_order():
    items = aggregate([
        _planned(_recipe("a", ("Onion", "1", "pieces"), ("Garlic", "2", "cloves"))),
        _planned(_recipe("b", ("Basil", "3", "leaves"), ("Onion", "1", "pieces"))),
    ])
    assert [i.name for i in items] == ["Onion", "Garlic", "Basil"]
    assert items[0].quantity == "2"


def test_missing_recipe_and_empty_ingredients_are_skipped():
    items = aggregate([
        _planned(None),
        _planned(_recipe("empty")),
        _planned(_recipe("a", ("Salt", "1", "tsp"))),
    ])
    assert len(items) == 1


def test_identical_input_gives_identical_output():
    meals = [
        _planned(_recipe("a", ("Salt", "1", "tsp"), ("Milk", "1", "Cup"))),
        _planned(_recipe("b", ("Milk", "1", "cup"), ("Salt", "1", "tsp"))),
    ]
    assert aggregate(meals) == aggregate(meals)


def test_parse_quantity_reads_leading_number():
    assert parse_quantity("1.5 cups") == 1.5
    assert parse_quantity("1/2") == 1.0
    assert parse_quantity(".5") == 0.5
    assert parse_quantity("to taste") == 0.0
    assert parse_quantity("") == 0.0


def test_format_quantity():
    assert format_quantity(3.0) == "3"
    assert format_quantity(0.5) == "0.5"
