from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import TypeVar

from pydantic import BaseModel, Field

from ..recipes.models import Category, Cuisine, RecipeSummary

K = TypeVar("K", Cuisine, Category)


class CookingHistoryEntry(BaseModel):
    recipe_id: str
    cuisine: Cuisine | None = None
    category: Category | None = None
    date: dt.datetime


class Season(str, Enum):
    winter = "winter"
    spring = "spring"
    summer = "summer"
    autumn = "autumn"


class PreferenceProfile(BaseModel):
    """Cuisine and category counts derived from a cooking history."""

    cuisine_counts: dict[Cuisine, int] = Field(default_factory=dict)
    category_counts: dict[Category, int] = Field(default_factory=dict)
    history_length: int = 0

    def top_cuisines(self, n: int = 5) -> list[Cuisine]:
        return _ranked(self.cuisine_counts, list(Cuisine))[:n]

    def top_categories(self, n: int = 5) -> list[Category]:
        return _ranked(self.category_counts, list(Category))[:n]


def _ranked(counts: dict[K, int], declared: list[K]) -> list[K]:
    # count desc, then enum declaration order
    return sorted(counts, key=lambda k: (-counts[k], declared.index(k)))


class RecommendationItem(BaseModel):
    recipe: RecipeSummary
    score: float | None = None


class RecommendationResponse(BaseModel):
    mode: str
    recommendations: list[RecommendationItem]
    total_candidates: int
    personalized: bool = False
