from __future__ import annotations

from fastapi.testclient import TestClient

from recipehub.app import app

from ._factories import reset_stores

client = TestClient(app)


def _login(c):
    c.post("/auth/login", json={"username": "user", "password": "user123"})


def _plan(c, recipe_id: str, date: str):
    c.post("/meal-plans", json={"recipe_id": recipe_id, "date": date, "meal_type": "Dinner"})


def _by_name(body) -> dict[str, dict]:
    return {item["name"]: item for item in body["items"]}


def test_get_creates_empty_list():
    reset_stores()
    _login(client)
    resp = client.get("/grocery-lists/2024-05")
    assert resp.status_code == 200
    assert resp.json() == {"user": "user", "week": "2024-05", "items": []}
    weeks = [gl["week"] for gl in client.get("/grocery-lists").json()]
    assert weeks == ["2024-05"]


def test_generate_merges_week_meals():
    reset_stores()
    _login(client)
    _plan(client, "r1", "2024-01-02")
    _plan(client, "r3", "2024-01-05")
    _plan(client, "r11", "2024-01-10")  # next week

    resp = client.post("/grocery-lists/generate", json={"week": "2024-01"})
    assert resp.status_code == 200
    body = resp.json()
    items = _by_name(body)
    assert len(body["items"]) == 12
    assert items["Tomato"]["quantity"] == "7"
    assert items["Salt"]["quantity"] == "2"
    assert items["Chicken breast"]["category"] == "Meat"
    assert items["Mozzarella cheese"]["category"] == "Dairy"
    assert items["Pizza dough"]["category"] == "Pantry"
    assert items["Basil"]["recipe_id"] == "r1"
    assert "Gruyere cheese" not in items
    assert all(item["id"] and not item["purchased"] for item in body["items"])
    assert body["items"][0]["name"] == "Pizza dough"


def test_generate_with_explicit_dates():
    reset_stores()
    _login(client)
    _plan(client, "r11", "2024-01-10")
    body = client.post(
        "/grocery-lists/generate",
        json={"week": "2024-02", "start_date": "2024-01-09", "end_date": "2024-01-10"},
    ).json()
    assert "Gruyere cheese" in _by_name(body)


def test_regenerate_replaces_items():
    reset_stores()
    _login(client)
    _plan(client, "r1", "2024-01-02")
    client.post("/grocery-lists/generate", json={"week": "2024-01"})
    client.post("/grocery-lists/2024-01/items", json={"name": "Paper towels", "quantity": "1"})
    body = client.post("/grocery-lists/generate", json={"week": "2024-01"}).json()
    assert "Paper towels" not in _by_name(body)
    assert len(body["items"]) == 6


def test_generate_rejects_bad_week():
    _login(client)
    assert client.post("/grocery-lists/generate", json={"week": "2024-60"}).status_code == 422
    assert client.get("/grocery-lists/not-a-week").status_code == 422


def test_add_update_and_remove_items():
    reset_stores()
    _login(client)
    body = client.post("/grocery-lists/2024-03/items", json={"name": "Paper towels", "quantity": "1"}).json()
    (item,) = body["items"]
    assert item["category"] == "Other"
    assert item["purchased"] is False

    body = client.put(
        f"/grocery-lists/2024-03/items/{item['id']}",
        json={"purchased": True, "quantity": "2"},
    ).json()
    assert body["items"][0]["purchased"] is True
    assert body["items"][0]["quantity"] == "2"
    assert body["items"][0]["name"] == "Paper towels"

    body = client.delete(f"/grocery-lists/2024-03/items/{item['id']}").json()
    assert body["items"] == []


def test_update_missing_item_or_list():
    reset_stores()
    _login(client)
    assert client.put("/grocery-lists/2024-03/items/x", json={"purchased": True}).status_code == 404
    client.get("/grocery-lists/2024-03")
    assert client.put("/grocery-lists/2024-03/items/x", json={"purchased": True}).status_code == 404
    assert client.delete("/grocery-lists/2024-04/items/x").status_code == 404


def test_lists_sorted_newest_week_first():
    reset_stores()
    _login(client)
    for week in ("2024-02", "2024-10", "2023-52"):
        client.get(f"/grocery-lists/{week}")
    weeks = [gl["week"] for gl in client.get("/grocery-lists").json()]
    assert weeks == ["2024-10", "2024-02", "2023-52"]
