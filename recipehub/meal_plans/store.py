from __future__ import annotations

import datetime as dt
import uuid

from ..recipes.store import get_recipe
from .models import (
    CreateMealPlanRequest,
    MealPlan,
    MealPlanStats,
    MealStatus,
    PlannedMeal,
    UpdateMealPlanRequest,
)

_meal_plans: dict[str, MealPlan] = {}


def create_meal_plan(user: str, body: CreateMealPlanRequest) -> MealPlan:
    plan = MealPlan(
        id=uuid.uuid4().hex,
        user=user,
        recipe_id=body.recipe_id,
        date=body.date,
        meal_type=body.meal_type,
        notes=body.notes,
    )
    _meal_plans[plan.id] = plan
    return plan


def get_meal_plan(user: str, plan_id: str) -> MealPlan | None:
    plan = _meal_plans.get(plan_id)
    if plan is None or plan.user != user:
        return None
    return plan


def list_meal_plans(
    user: str,
    start: dt.date | None = None,
    end: dt.date | None = None,
) -> list[MealPlan]:
    """The user's plans in ``[start, end]`` (either bound optional), by date."""
    plans = [
        p for p in _meal_plans.values()
        if p.user == user
        and (start is None or p.date >= start)
        and (end is None or p.date <= end)
    ]
    return sorted(plans, key=lambda p: p.date)


def planned_meals(user: str, start: dt.date, end: dt.date) -> list[PlannedMeal]:
    """Join the user's plans in the range with their recipes."""
    return [
        PlannedMeal(meal_plan=p, recipe=get_recipe(p.recipe_id))
        for p in list_meal_plans(user, start, end)
    ]


def set_status(user: str, plan_id: str, status: MealStatus) -> MealPlan | None:
    plan = get_meal_plan(user, plan_id)
    if plan is None:
        return None
    plan = plan.model_copy(update={"status": status})
    _meal_plans[plan_id] = plan
    return plan


def update_meal_plan(user: str, plan_id: str, body: UpdateMealPlanRequest) -> MealPlan | None:
    """Apply the fields set on *body*; omitted or null fields keep their value."""
    plan = get_meal_plan(user, plan_id)
    if plan is None:
        return None
    plan = plan.model_copy(update=body.model_dump(exclude_none=True))
    _meal_plans[plan_id] = plan
    return plan


def meal_plan_stats(user: str, recent: int = 5) -> MealPlanStats:
    plans = list_meal_plans(user)
    cooked = sum(1 for p in plans if p.status == MealStatus.cooked)
    planned = sum(1 for p in plans if p.status == MealStatus.planned)
    return MealPlanStats(
        total_plans=len(plans),
        cooked_plans=cooked,
        planned_plans=planned,
        completion_rate=round(cooked / len(plans) * 100, 1) if plans else 0.0,
        recent_plans=sorted(plans, key=lambda p: p.date, reverse=True)[:recent],
    )


def delete_meal_plan(user: str, plan_id: str) -> bool:
    if get_meal_plan(user, plan_id) is None:
        return False
    del _meal_plans[plan_id]
    return True


def clear_meal_plans() -> None:
    _meal_plans.clear()
