from __future__ import annotations

import datetime as dt
from enum import Enum

from pydantic import BaseModel, Field

from ..recipes.models import Recipe


class MealType(str, Enum):
    breakfast = "Breakfast"
    lunch = "Lunch"
    dinner = "Dinner"
    snack = "Snack"


class MealStatus(str, Enum):
    planned = "Planned"
    cooking = "Cooking"
    cooked = "Cooked"
    skipped = "Skipped"


class MealPlan(BaseModel):
    id: str
    user: str
    recipe_id: str
    date: dt.date
    meal_type: MealType
    status: MealStatus = MealStatus.planned
    notes: str = ""


class PlannedMeal(BaseModel):
    """A meal plan joined with its recipe (``None`` if the recipe is gone)."""

    meal_plan: MealPlan
    recipe: Recipe | None = None


class CreateMealPlanRequest(BaseModel):
    recipe_id: str = Field(..., min_length=1)
    date: dt.date
    meal_type: MealType
    notes: str = Field(default="", max_length=500)


class UpdateMealPlanRequest(BaseModel):
    date: dt.date | None = None
    meal_type: MealType | None = None
    status: MealStatus | None = None
    notes: str | None = Field(default=None, max_length=500)


class MealPlanStats(BaseModel):
    total_plans: int
    cooked_plans: int
    planned_plans: int
    completion_rate: float
    recent_plans: list[MealPlan]
