from __future__ import annotations

from pydantic import BaseModel, Field


class Review(BaseModel):
    id: str
    user: str
    recipe_id: str
    rating: int = Field(..., ge=1, le=5)
    comment: str
    approved: bool = False


class CreateReviewRequest(BaseModel):
    recipe_id: str = Field(..., min_length=1)
    rating: int = Field(..., ge=1, le=5)
    comment: str = Field(..., min_length=1, max_length=1000)
