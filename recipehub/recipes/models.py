from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Cuisine(str, Enum):
    italian = "Italian"
    mexican = "Mexican"
    indian = "Indian"
    chinese = "Chinese"
    thai = "Thai"
    french = "French"
    american = "American"
    japanese = "Japanese"
    korean = "Korean"
    middle_eastern = "Middle Eastern"
    greek = "Greek"
    mediterranean = "Mediterranean"
    other = "Other"


class Category(str, Enum):
    appetizer = "Appetizer"
    main_course = "Main Course"
    dessert = "Dessert"
    snack = "Snack"
    beverage = "Beverage"
    salad = "Salad"
    soup = "Soup"
    breakfast = "Breakfast"


class Difficulty(str, Enum):
    easy = "Easy"
    medium = "Medium"
    hard = "Hard"


class Ingredient(BaseModel):
    name: str = Field(..., min_length=1)
    quantity: str = Field(default="", description='Numeric-as-text, e.g. "2" or "to taste"')
    unit: str = ""


class Recipe(BaseModel):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=100)
    description: str = ""
    cuisine: Cuisine
    category: Category
    difficulty: Difficulty
    cooking_time: int = Field(default=0, ge=0, description="Minutes")
    servings: int = Field(default=1, ge=1)
    calories: int = Field(default=0, ge=0)
    average_rating: float = Field(default=0.0, ge=0.0, le=5.0)
    num_reviews: int = Field(default=0, ge=0)
    cook_count: int = Field(default=0, ge=0)
    approved: bool = False
    ingredients: list[Ingredient] = Field(default_factory=list)

    model_config = {"frozen": True}


class RecipeSummary(BaseModel):
    """Recipe without its ingredient list, as returned by listing endpoints."""

    id: str
    name: str
    cuisine: Cuisine
    category: Category
    difficulty: Difficulty
    cooking_time: int
    average_rating: float
    cook_count: int

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> "RecipeSummary":
        return cls(**recipe.model_dump(include=set(cls.model_fields)))


class RecipeListResponse(BaseModel):
    recipes: list[RecipeSummary]
    total: int
