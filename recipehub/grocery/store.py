from __future__ import annotations

import uuid

from .models import GroceryList, GroceryListItem, UpdateGroceryItemRequest

# One list per (user, week)
_lists: dict[tuple[str, str], GroceryList] = {}


def _with_id(item: GroceryListItem) -> GroceryListItem:
    return item.model_copy(update={"id": uuid.uuid4().hex})


def get_or_create(user: str, week: str) -> GroceryList:
    key = (user, week)
    if key not in _lists:
        _lists[key] = GroceryList(user=user, week=week)
    return _lists[key]


def get_list(user: str, week: str) -> GroceryList | None:
    return _lists.get((user, week))


def list_for_user(user: str) -> list[GroceryList]:
    """All of the user's lists, newest week first."""
    lists = [gl for (owner, _), gl in _lists.items() if owner == user]
    return sorted(lists, key=lambda gl: gl.week, reverse=True)


def replace_items(user: str, week: str, items: list[GroceryListItem]) -> GroceryList:
    grocery_list = get_or_create(user, week).model_copy(
        update={"items": [_with_id(i) for i in items]},
    )
    _lists[(user, week)] = grocery_list
    return grocery_list


def add_item(user: str, week: str, item: GroceryListItem) -> GroceryList:
    current = get_or_create(user, week)
    grocery_list = current.model_copy(update={"items": [*current.items, _with_id(item)]})
    _lists[(user, week)] = grocery_list
    return grocery_list


def update_item(
    user: str,
    week: str,
    item_id: str,
    changes: UpdateGroceryItemRequest,
) -> GroceryList | None:
    """Apply the non-empty fields of *changes*; ``None`` if list or item is missing."""
    current = get_list(user, week)
    if current is None:
        return None
    if not any(i.id == item_id for i in current.items):
        return None

    updates = {k: v for k, v in changes.model_dump().items() if v not in (None, "")}
    items = [
        i.model_copy(update=updates) if i.id == item_id else i
        for i in current.items
    ]
    grocery_list = current.model_copy(update={"items": items})
    _lists[(user, week)] = grocery_list
    return grocery_list


def remove_item(user: str, week: str, item_id: str) -> GroceryList | None:
    current = get_list(user, week)
    if current is None:
        return None
    grocery_list = current.model_copy(
        update={"items": [i for i in current.items if i.id != item_id]},
    )
    _lists[(user, week)] = grocery_list
    return grocery_list


def clear_grocery_lists() -> None:
    _lists.clear()
