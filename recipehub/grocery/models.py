from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from ..meal_plans.weeks import week_date_range


class GroceryCategory(str, Enum):
    produce = "Produce"
    dairy = "Dairy"
    meat = "Meat"
    pantry = "Pantry"
    beverages = "Beverages"
    other = "Other"


class GroceryListItem(BaseModel):
    id: str = ""
    name: str
    quantity: str
    unit: str = ""
    category: GroceryCategory = GroceryCategory.other
    purchased: bool = False
    recipe_id: str | None = None


class GroceryList(BaseModel):
    user: str
    week: str
    items: list[GroceryListItem] = Field(default_factory=list)


class GenerateGroceryListRequest(BaseModel):
    week: str
    start_date: date | None = None
    end_date: date | None = None

    @field_validator("week")
    @classmethod
    def _valid_week(cls, value: str) -> str:
        week_date_range(value)
        return value


class AddGroceryItemRequest(BaseModel):
    name: str = Field(..., min_length=1)
    quantity: str = Field(..., min_length=1)
    unit: str = ""
    category: GroceryCategory = GroceryCategory.other


class UpdateGroceryItemRequest(BaseModel):
    purchased: bool | None = None
    name: str | None = None
    quantity: str | None = None
    unit: str | None = None
    category: GroceryCategory | None = None
