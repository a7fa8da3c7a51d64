from __future__ import annotations

import uuid

from .models import CreateReviewRequest, Review

_reviews: dict[str, Review] = {}


def add_review(user: str, body: CreateReviewRequest) -> Review | None:
    """Store a new review; ``None`` if *user* already reviewed the recipe."""
    if any(r.user == user and r.recipe_id == body.recipe_id for r in _reviews.values()):
        return None
    review = Review(
        id=uuid.uuid4().hex,
        user=user,
        recipe_id=body.recipe_id,
        rating=body.rating,
        comment=body.comment,
    )
    _reviews[review.id] = review
    return review


def approve_review(review_id: str) -> Review | None:
    review = _reviews.get(review_id)
    if review is None:
        return None
    review = review.model_copy(update={"approved": True})
    _reviews[review_id] = review
    return review


def list_reviews(approved: bool | None = None) -> list[Review]:
    """Every review in creation order, optionally filtered on approval."""
    return [r for r in _reviews.values() if approved is None or r.approved == approved]


def get_recipe_reviews(recipe_id: str) -> list[Review]:
    return [r for r in _reviews.values() if r.recipe_id == recipe_id and r.approved]


def get_recipe_ratings(recipe_id: str) -> list[int]:
    return [r.rating for r in _reviews.values() if r.recipe_id == recipe_id]


def get_user_ratings(user: str) -> dict[str, int]:
    """``recipe_id -> rating`` for the user's approved reviews."""
    return {
        r.recipe_id: r.rating
        for r in _reviews.values()
        if r.user == user and r.approved
    }


def clear_reviews() -> None:
    _reviews.clear()
