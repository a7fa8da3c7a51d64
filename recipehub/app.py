from __future__ import annotations

import datetime as dt
import logging
import time
from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events, record_event
from .auth.dependencies import require_admin, require_user
from .auth.models import LoginRequest
from .auth.users import authenticate, get_cooking_history, record_cooked
from .config import DEFAULT_APP_CONFIG
from .errors import InvalidInputError
from .grocery.aggregator import aggregate
from .grocery.models import (
    AddGroceryItemRequest,
    GenerateGroceryListRequest,
    GroceryList,
    GroceryListItem,
    UpdateGroceryItemRequest,
)
from .grocery import store as grocery_store
from .meal_plans import store as meal_plan_store
from .meal_plans.models import (
    CreateMealPlanRequest,
    MealPlan,
    MealPlanStats,
    MealStatus,
    UpdateMealPlanRequest,
)
from .meal_plans.weeks import week_date_range
from .recipes.models import (
    Category,
    Cuisine,
    Difficulty,
    Recipe,
    RecipeListResponse,
    RecipeSummary,
)
from .recipes.store import (
    get_approved_recipes,
    get_recipe,
    increment_cook_count,
    sample_approved,
    search_by_ingredients,
    update_rating,
)
from .recommendations import engine
from .recommendations.cache import cache_get, cache_set, get_cache_stats, invalidate
from .recommendations.models import (
    CookingHistoryEntry,
    RecommendationItem,
    RecommendationResponse,
    Season,
)
from .reviews.models import CreateReviewRequest, Review
from .reviews.store import (
    add_review,
    approve_review,
    get_recipe_ratings,
    get_recipe_reviews,
    get_user_ratings,
    list_reviews,
)

logger = logging.getLogger(__name__)

config = DEFAULT_APP_CONFIG

app = FastAPI(title="RecipeHub API", version="1.0.0")
app.add_middleware(SessionMiddleware, secret_key=config.session_secret)

Limit = Annotated[int, Query(ge=1, le=config.max_limit)]


@app.exception_handler(InvalidInputError)
def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def _response(
    mode: str,
    recipes: list[Recipe],
    total_candidates: int,
    start_time: float,
    scores: list[float] | None = None,
    personalized: bool = False,
) -> RecommendationResponse:
    items = [
        RecommendationItem(
            recipe=RecipeSummary.from_recipe(r),
            score=round(scores[i], 4) if scores is not None else None,
        )
        for i, r in enumerate(recipes)
    ]
    response = RecommendationResponse(
        mode=mode,
        recommendations=items,
        total_candidates=total_candidates,
        personalized=personalized,
    )
    _record(response, start_time)
    return response


def _record(response: RecommendationResponse, start_time: float, cache_hit: bool = False) -> None:
    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    record_event("recommendation", {
        "mode": response.mode,
        "personalized": response.personalized,
        "total_candidates": response.total_candidates,
        "recipe_ids": [item.recipe.id for item in response.recommendations],
        "response_time_ms": elapsed_ms,
        "cache_hit": cache_hit,
    })


def _cached(request_dict: dict, start_time: float, build) -> RecommendationResponse:
    cached = cache_get(request_dict)
    if cached is not None:
        _record(cached, start_time, cache_hit=True)
        return cached
    response = build()
    cache_set(request_dict, response)
    return response


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    return {
        "cuisines": [c.value for c in Cuisine],
        "categories": [c.value for c in Category],
        "difficulties": [d.value for d in Difficulty],
        "seasons": [s.value for s in Season],
    }


@app.get("/recipes", response_model=RecipeListResponse)
def list_recipes(
    cuisine: Cuisine | None = None,
    category: Category | None = None,
    ingredients: str | None = None,
) -> RecipeListResponse:
    if ingredients is None:
        pool = get_approved_recipes()
    else:
        terms = [t for t in ingredients.split(",") if t.strip()]
        if not terms:
            raise InvalidInputError("ingredients must name at least one ingredient")
        pool = search_by_ingredients(terms)

    recipes = [
        r for r in pool
        if (cuisine is None or r.cuisine == cuisine)
        and (category is None or r.category == category)
    ]
    return RecipeListResponse(
        recipes=[RecipeSummary.from_recipe(r) for r in recipes],
        total=len(recipes),
    )


@app.get("/recipes/{recipe_id}", response_model=Recipe)
def recipe_detail(recipe_id: str) -> Recipe:
    recipe = get_recipe(recipe_id)
    if recipe is None or not recipe.approved:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe


@app.get("/recipes/{recipe_id}/reviews", response_model=list[Review])
def recipe_reviews(recipe_id: str) -> list[Review]:
    recipe = get_recipe(recipe_id)
    if recipe is None or not recipe.approved:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return get_recipe_reviews(recipe_id)


@app.get("/recommendations/trending", response_model=RecommendationResponse)
def trending_recipes(limit: Limit = config.default_limit) -> RecommendationResponse:
    start_time = time.time()

    def build() -> RecommendationResponse:
        candidates = get_approved_recipes()
        return _response("trending", engine.trending(candidates, limit), len(candidates), start_time)

    return _cached({"mode": "trending", "limit": limit}, start_time, build)


@app.get("/recommendations/random", response_model=RecommendationResponse)
def random_recipes(limit: Limit = config.default_limit) -> RecommendationResponse:
    start_time = time.time()
    recipes = sample_approved(limit)
    return _response("random", recipes, len(get_approved_recipes()), start_time)


@app.get("/recommendations/seasonal/{season}", response_model=RecommendationResponse)
def seasonal_recipes(season: str, limit: Limit = config.default_limit) -> RecommendationResponse:
    start_time = time.time()
    token = season.strip().lower()

    def build() -> RecommendationResponse:
        candidates = get_approved_recipes()
        recipes = engine.seasonal(candidates, token, limit)
        return _response("seasonal", recipes, len(candidates), start_time)

    return _cached({"mode": "seasonal", "season": token, "limit": limit}, start_time, build)


@app.get("/recommendations/similar/{recipe_id}", response_model=RecommendationResponse)
def similar_recipes(
    recipe_id: str,
    limit: Limit = config.similar_limit,
) -> RecommendationResponse:
    start_time = time.time()
    reference = get_recipe(recipe_id)
    if reference is None or not reference.approved:
        raise HTTPException(status_code=404, detail="Recipe not found")

    def build() -> RecommendationResponse:
        candidates = get_approved_recipes()
        ranked = engine.ranked_similar(reference, candidates, limit)
        return _response(
            "similar",
            [s.recipe for s in ranked],
            len(candidates),
            start_time,
            scores=[s.score for s in ranked],
        )

    return _cached({"mode": "similar", "recipe_id": recipe_id, "limit": limit}, start_time, build)


# ── Auth endpoints ───────────────────────────────────────────────────────


@app.post("/auth/login")
def login(body: LoginRequest, request: Request) -> dict:
    user = authenticate(body.username, body.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    request.session["user"] = user
    return {"status": "ok", "user": user}


@app.post("/auth/logout")
def logout(request: Request) -> dict:
    request.session.clear()
    return {"status": "logged_out"}


@app.get("/auth/me")
def auth_me(user: dict = Depends(require_user)) -> dict:
    return user


# ── Personalised recommendations ─────────────────────────────────────────


@app.get("/recommendations", response_model=RecommendationResponse)
def recommendations(
    limit: Limit = config.default_limit,
    user: dict = Depends(require_user),
) -> RecommendationResponse:
    start_time = time.time()
    history = get_cooking_history(user["username"])
    candidates = get_approved_recipes()

    if not history:
        recipes = engine.popular_fallback(candidates, limit)
        return _response("personalized", recipes, len(candidates), start_time)

    ratings = get_user_ratings(user["username"])
    ranked = engine.ranked_recommendations(history, candidates, ratings, limit)
    return _response(
        "personalized",
        [s.recipe for s in ranked],
        len(candidates),
        start_time,
        scores=[s.score for s in ranked],
        personalized=True,
    )


@app.get("/recommendations/category/{category}", response_model=RecommendationResponse)
def recommendations_by_category(
    category: Category,
    limit: Limit = config.default_limit,
    user: dict = Depends(require_user),
) -> RecommendationResponse:
    start_time = time.time()
    history = get_cooking_history(user["username"])
    candidates = get_approved_recipes()
    recipes = engine.by_category(history, candidates, category, limit)
    return _response("category", recipes, len(candidates), start_time, personalized=bool(history))


@app.get("/recommendations/cuisine/{cuisine}", response_model=RecommendationResponse)
def recommendations_by_cuisine(
    cuisine: Cuisine,
    limit: Limit = config.default_limit,
    user: dict = Depends(require_user),
) -> RecommendationResponse:
    start_time = time.time()
    history = get_cooking_history(user["username"])
    candidates = get_approved_recipes()
    recipes = engine.by_cuisine(history, candidates, cuisine, limit)
    return _response("cuisine", recipes, len(candidates), start_time, personalized=bool(history))


@app.get("/users/me/history", response_model=list[CookingHistoryEntry])
def my_history(user: dict = Depends(require_user)) -> list[CookingHistoryEntry]:
    return get_cooking_history(user["username"])


# ── Meal plans ───────────────────────────────────────────────────────────


@app.post("/meal-plans", response_model=MealPlan, status_code=201)
def create_meal_plan(
    body: CreateMealPlanRequest,
    user: dict = Depends(require_user),
) -> MealPlan:
    if get_recipe(body.recipe_id) is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return meal_plan_store.create_meal_plan(user["username"], body)


@app.get("/meal-plans", response_model=list[MealPlan])
def list_meal_plans(
    start_date: dt.date | None = None,
    end_date: dt.date | None = None,
    user: dict = Depends(require_user),
) -> list[MealPlan]:
    return meal_plan_store.list_meal_plans(user["username"], start_date, end_date)


@app.get("/meal-plans/week/{week}", response_model=list[MealPlan])
def weekly_meal_plans(week: str, user: dict = Depends(require_user)) -> list[MealPlan]:
    start, end = week_date_range(week)
    return meal_plan_store.list_meal_plans(user["username"], start, end)


@app.get("/meal-plans/stats", response_model=MealPlanStats)
def meal_plan_stats(user: dict = Depends(require_user)) -> MealPlanStats:
    return meal_plan_store.meal_plan_stats(user["username"])


@app.get("/meal-plans/{plan_id}", response_model=MealPlan)
def meal_plan_detail(plan_id: str, user: dict = Depends(require_user)) -> MealPlan:
    plan = meal_plan_store.get_meal_plan(user["username"], plan_id)
    if plan is None:
        raise HTTPException(status_code=404, detail="Meal plan not found")
    return plan


@app.put("/meal-plans/{plan_id}", response_model=MealPlan)
def update_meal_plan(
    plan_id: str,
    body: UpdateMealPlanRequest,
    user: dict = Depends(require_user),
) -> MealPlan:
    plan = meal_plan_store.update_meal_plan(user["username"], plan_id, body)
    if plan is None:
        raise HTTPException(status_code=404, detail="Meal plan not found")
    return plan


@app.put("/meal-plans/{plan_id}/cook", response_model=MealPlan)
def cook_meal_plan(plan_id: str, user: dict = Depends(require_user)) -> MealPlan:
    plan = meal_plan_store.set_status(user["username"], plan_id, MealStatus.cooked)
    if plan is None:
        raise HTTPException(status_code=404, detail="Meal plan not found")

    recipe = get_recipe(plan.recipe_id)
    if recipe is not None:
        record_cooked(user["username"], recipe)
        increment_cook_count(recipe.id)
        invalidate()
    return plan


@app.delete("/meal-plans/{plan_id}")
def delete_meal_plan(plan_id: str, user: dict = Depends(require_user)) -> dict:
    if not meal_plan_store.delete_meal_plan(user["username"], plan_id):
        raise HTTPException(status_code=404, detail="Meal plan not found")
    return {"status": "removed"}


# ── Reviews ──────────────────────────────────────────────────────────────


@app.post("/reviews", response_model=Review, status_code=201)
def create_review(body: CreateReviewRequest, user: dict = Depends(require_user)) -> Review:
    if get_recipe(body.recipe_id) is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    review = add_review(user["username"], body)
    if review is None:
        raise HTTPException(status_code=400, detail="Recipe already reviewed")
    update_rating(body.recipe_id, get_recipe_ratings(body.recipe_id))
    invalidate()
    return review


# ── Grocery lists ────────────────────────────────────────────────────────


@app.get("/grocery-lists", response_model=list[GroceryList])
def grocery_lists(user: dict = Depends(require_user)) -> list[GroceryList]:
    return grocery_store.list_for_user(user["username"])


@app.post("/grocery-lists/generate", response_model=GroceryList)
def generate_grocery_list(
    body: GenerateGroceryListRequest,
    user: dict = Depends(require_user),
) -> GroceryList:
    if body.start_date and body.end_date:
        start, end = body.start_date, body.end_date
    else:
        start, end = week_date_range(body.week)

    planned = meal_plan_store.planned_meals(user["username"], start, end)
    items = aggregate(planned)
    grocery_list = grocery_store.replace_items(user["username"], body.week, items)

    logger.info(
        "Generated grocery list %s for %s: %d meals, %d items",
        body.week, user["username"], len(planned), len(items),
    )
    record_event("grocery_generate", {"week": body.week, "meals": len(planned), "items": len(items)})
    return grocery_list


@app.get("/grocery-lists/{week}", response_model=GroceryList)
def grocery_list(week: str, user: dict = Depends(require_user)) -> GroceryList:
    week_date_range(week)
    return grocery_store.get_or_create(user["username"], week)


@app.post("/grocery-lists/{week}/items", response_model=GroceryList)
def add_grocery_item(
    week: str,
    body: AddGroceryItemRequest,
    user: dict = Depends(require_user),
) -> GroceryList:
    week_date_range(week)
    item = GroceryListItem(
        name=body.name,
        quantity=body.quantity,
        unit=body.unit,
        category=body.category,
    )
    return grocery_store.add_item(user["username"], week, item)


@app.put("/grocery-lists/{week}/items/{item_id}", response_model=GroceryList)
def update_grocery_item(
    week: str,
    item_id: str,
    body: UpdateGroceryItemRequest,
    user: dict = Depends(require_user),
) -> GroceryList:
    if grocery_store.get_list(user["username"], week) is None:
        raise HTTPException(status_code=404, detail="Grocery list not found")
    grocery_list = grocery_store.update_item(user["username"], week, item_id, body)
    if grocery_list is None:
        raise HTTPException(status_code=404, detail="Item not found")
    return grocery_list


@app.delete("/grocery-lists/{week}/items/{item_id}", response_model=GroceryList)
def remove_grocery_item(
    week: str,
    item_id: str,
    user: dict = Depends(require_user),
) -> GroceryList:
    grocery_list = grocery_store.remove_item(user["username"], week, item_id)
    if grocery_list is None:
        raise HTTPException(status_code=404, detail="Grocery list not found")
    return grocery_list


# ── Admin endpoints ──────────────────────────────────────────────────────


@app.get("/reviews", response_model=list[Review])
def all_reviews(
    approved: bool | None = None,
    user: dict = Depends(require_admin),
) -> list[Review]:
    return list_reviews(approved)


@app.put("/reviews/{review_id}/approve", response_model=Review)
def approve(review_id: str, user: dict = Depends(require_admin)) -> Review:
    review = approve_review(review_id)
    if review is None:
        raise HTTPException(status_code=404, detail="Review not found")
    return review


@app.get("/analytics")
def analytics(user: dict = Depends(require_admin)) -> dict:
    return compute_analytics(get_events())


@app.get("/cache/stats")
def cache_stats(user: dict = Depends(require_admin)) -> dict:
    return get_cache_stats()
