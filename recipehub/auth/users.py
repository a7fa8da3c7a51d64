from __future__ import annotations

import datetime as dt
from typing import Any

import bcrypt

from ..recipes.models import Recipe
from ..recommendations.models import CookingHistoryEntry

_users: dict[str, dict[str, Any]] = {}


def _hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode(), bcrypt.gensalt()).decode()


def _verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode(), hashed.encode())


def _seed_users() -> None:
    """Pre-seed demo users on import."""
    _users["user"] = {
        "password_hash": _hash_password("user123"),
        "role": "user",
        "cooking_history": [],
    }
    _users["admin"] = {
        "password_hash": _hash_password("admin123"),
        "role": "admin",
        "cooking_history": [],
    }


def authenticate(username: str, password: str) -> dict[str, Any] | None:
    """Verify credentials. Returns ``{username, role}`` or ``None``."""
    record = _users.get(username)
    if record and _verify_password(password, record["password_hash"]):
        return {"username": username, "role": record["role"]}
    return None


# ── Cooking history ──────────────────────────────────────────────────────


def get_cooking_history(username: str) -> list[CookingHistoryEntry]:
    record = _users.get(username)
    if not record:
        return []
    return list(record["cooking_history"])


def record_cooked(
    username: str,
    recipe: Recipe,
    when: dt.datetime | None = None,
) -> list[CookingHistoryEntry]:
    """Add *recipe* to the user's history, or refresh the date of its entry.

    A user never has more than one entry per recipe.
    """
    record = _users.get(username)
    if record is None:
        raise KeyError(username)
    when = when or dt.datetime.now(dt.timezone.utc)

    history: list[CookingHistoryEntry] = record["cooking_history"]
    for i, entry in enumerate(history):
        if entry.recipe_id == recipe.id:
            history[i] = entry.model_copy(update={"date": when})
            break
    else:
        history.append(CookingHistoryEntry(
            recipe_id=recipe.id,
            cuisine=recipe.cuisine,
            category=recipe.category,
            date=when,
        ))
    return list(history)


def clear_cooking_history(username: str | None = None) -> None:
    targets = [username] if username else list(_users)
    for name in targets:
        if name in _users:
            _users[name]["cooking_history"] = []


_seed_users()
