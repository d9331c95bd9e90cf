"""Test category endpoints."""
from conftest import seed
from opsadmin.models import Game


def _create(client, headers, game_id, name):
    return client.post(
        "/api/categories/create",
        headers=headers,
        json={"gameId": game_id, "name": name, "description": f"{name} questions", "emoji": "🔥"},
    )


def test_deleted_slot_is_reused(client, admin_headers):
    (game,) = seed(Game(title="Never Have I Ever"))

    a = _create(client, admin_headers, game.id, "After Dark")
    assert a.status_code == 201
    assert a.json()["sort_order"] == 1
    assert a.json()["id"] == f"after-dark-{game.id}"
    assert a.json()["is_active"] is False

    b = _create(client, admin_headers, game.id, "Party")
    assert b.json()["sort_order"] == 2

    deleted = client.post("/api/categories/delete", headers=admin_headers, json={"categoryId": a.json()["id"]})
    assert deleted.status_code == 200
    assert deleted.json() == {"success": True}

    c = _create(client, admin_headers, game.id, "Couples")
    assert c.status_code == 201
    assert c.json()["sort_order"] == 1


def test_create_category_for_unknown_game(client, admin_headers):
    response = _create(client, admin_headers, "missing-game", "Party")
    assert response.status_code == 404
    assert response.json() == {"error": "Game not found"}


def test_toggle_and_update_category(client, admin_headers):
    (game,) = seed(Game(title="Most Likely To"))
    category_id = _create(client, admin_headers, game.id, "Friends").json()["id"]

    toggled = client.post(
        "/api/categories/toggle", headers=admin_headers, json={"categoryId": category_id, "isActive": True}
    )
    assert toggled.status_code == 200
    assert toggled.json()["is_active"] is True

    updated = client.post(
        "/api/categories/update",
        headers=admin_headers,
        json={"categoryId": category_id, "updates": {"emoji": "🎉", "sort_order": 7}},
    )
    assert updated.status_code == 200
    body = updated.json()
    assert body["emoji"] == "🎉"
    assert body["sort_order"] == 7
    assert body["name"] == "Friends"
    assert body["is_active"] is True


def test_games_list_categories_in_sort_order(client, admin_headers):
    (game,) = seed(Game(title="Truth or Dare"))
    for name in ("One", "Two", "Three"):
        _create(client, admin_headers, game.id, name)
    client.post("/api/categories/update", headers=admin_headers,
                json={"categoryId": f"one-{game.id}", "updates": {"sort_order": 9}})

    response = client.get(f"/api/games/{game.id}", headers=admin_headers)
    assert response.status_code == 200
    assert [c["name"] for c in response.json()["categories"]] == ["Two", "Three", "One"]

    games = client.get("/api/games", headers=admin_headers).json()
    assert len(games) == 1
    assert len(games[0]["categories"]) == 3
