"""Test game content endpoints."""
from conftest import seed
from opsadmin.models import Category, Game


def test_create_list_delete_question(client, admin_headers):
    response = client.post(
        "/api/content/would-you-rather/create",
        headers=admin_headers,
        json={"question": "Would you rather...", "option_a": "Fly", "option_b": "Be invisible", "category_id": "c-1"},
    )
    assert response.status_code == 201
    item = response.json()
    assert item["difficulty_level"] == "medium"
    assert item["is_active"] is True

    listed = client.get("/api/content/would-you-rather?category_id=c-1", headers=admin_headers).json()
    assert [q["id"] for q in listed] == [item["id"]]
    assert client.get("/api/content/would-you-rather?category_id=other", headers=admin_headers).json() == []

    deleted = client.delete(f"/api/content/would-you-rather/delete?id={item['id']}", headers=admin_headers)
    assert deleted.json() == {"success": True}
    assert client.get("/api/content/would-you-rather", headers=admin_headers).json() == []


def test_list_by_game(client, admin_headers):
    game, other = seed(Game(title="Never Have I Ever"), Game(title="Other"))
    seed(
        Category(id="wild", game_id=game.id, name="Wild", description="d", emoji="x", sort_order=1),
        Category(id="calm", game_id=other.id, name="Calm", description="d", emoji="x", sort_order=1),
    )
    for category_id in ("wild", "calm"):
        client.post("/api/content/never-have-i-ever/create", headers=admin_headers,
                    json={"statement": f"...been {category_id}", "category_id": category_id})

    items = client.get(f"/api/content/never-have-i-ever?game_id={game.id}", headers=admin_headers).json()
    assert [i["category_id"] for i in items] == ["wild"]


def test_invalid_content_is_400(client, admin_headers):
    response = client.post("/api/content/most-likely-to/create", headers=admin_headers,
                           json={"question": "Who...", "difficulty_level": "extreme"})
    assert response.status_code == 400
    assert response.json()["details"][0].startswith("difficulty_level:")


def test_unknown_kind_is_404(client, admin_headers):
    response = client.get("/api/content/trivia", headers=admin_headers)
    assert response.status_code == 404
    assert response.json() == {"error": "Unknown content type: trivia"}
