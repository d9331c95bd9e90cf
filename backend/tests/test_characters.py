"""Test AI character and feature flag endpoints."""
from datetime import datetime

from conftest import seed
from opsadmin.models import CharacterGeneratedImage, CharacterReferenceImage, FeatureFlag


def test_character_crud(client, admin_headers):
    created = client.post("/api/characters/create", headers=admin_headers, json={"name": "  Luna "})
    assert created.status_code == 201
    character = created.json()
    assert character["name"] == "Luna"

    renamed = client.post("/api/characters/update", headers=admin_headers,
                          json={"id": character["id"], "name": "Luna Rose"})
    assert renamed.json()["name"] == "Luna Rose"

    listed = client.get("/api/characters/list", headers=admin_headers).json()
    assert [c["id"] for c in listed] == [character["id"]]

    blank = client.post("/api/characters/create", headers=admin_headers, json={"name": "   "})
    assert blank.status_code == 400


def test_character_images(client, admin_headers):
    character = client.post("/api/characters/create", headers=admin_headers, json={"name": "Nova"}).json()
    cid = character["id"]
    seed(
        CharacterReferenceImage(id="ref-1", character_id=cid, image_url="https://cdn/ref1.png"),
        CharacterGeneratedImage(id="gen-1", character_id=cid, image_url="https://cdn/g1.png", prompt="beach",
                                generation_number=1, created_at=datetime(2024, 1, 1)),
        CharacterGeneratedImage(id="gen-2", character_id=cid, image_url="https://cdn/g2.png", prompt="city",
                                generation_number=2, created_at=datetime(2024, 1, 2)),
    )

    toggled = client.post(f"/api/characters/{cid}/reference-images/toggle-default", headers=admin_headers,
                          json={"id": "ref-1", "is_default": True})
    assert toggled.json()["is_default"] is True

    archived = client.post(f"/api/characters/{cid}/generated-images/gen-1/archive", headers=admin_headers)
    assert archived.json()["is_archived"] is True

    detail = client.get(f"/api/characters/{cid}", headers=admin_headers).json()
    assert [r["id"] for r in detail["reference_images"]] == ["ref-1"]
    assert [g["id"] for g in detail["generated_images"]] == ["gen-2"]

    deleted = client.post("/api/characters/delete", headers=admin_headers, json={"id": cid})
    assert deleted.json() == {"success": True}
    assert client.get(f"/api/characters/{cid}", headers=admin_headers).status_code == 404


def test_image_of_other_character_is_404(client, admin_headers):
    a = client.post("/api/characters/create", headers=admin_headers, json={"name": "A"}).json()
    b = client.post("/api/characters/create", headers=admin_headers, json={"name": "B"}).json()
    seed(CharacterGeneratedImage(id="gen-a", character_id=a["id"], image_url="u", prompt="p"))

    response = client.post(f"/api/characters/{b['id']}/generated-images/gen-a/archive", headers=admin_headers)
    assert response.status_code == 404


def test_delete_reference_image(client, admin_headers):
    a = client.post("/api/characters/create", headers=admin_headers, json={"name": "A"}).json()
    b = client.post("/api/characters/create", headers=admin_headers, json={"name": "B"}).json()
    seed(
        CharacterReferenceImage(id="ref-a", character_id=a["id"], image_url="https://cdn/a.png"),
        CharacterReferenceImage(id="ref-b", character_id=b["id"], image_url="https://cdn/b.png"),
    )

    wrong_owner = client.post(f"/api/characters/{a['id']}/reference-images/delete", headers=admin_headers,
                              json={"id": "ref-b"})
    assert wrong_owner.status_code == 404

    deleted = client.post(f"/api/characters/{a['id']}/reference-images/delete", headers=admin_headers,
                          json={"id": "ref-a"})
    assert deleted.json() == {"success": True}

    missing_id = client.post(f"/api/characters/{a['id']}/reference-images/delete", headers=admin_headers, json={})
    assert missing_id.status_code == 400

    assert client.get(f"/api/characters/{a['id']}", headers=admin_headers).json()["reference_images"] == []
    assert [r["id"] for r in client.get(f"/api/characters/{b['id']}", headers=admin_headers).json()["reference_images"]] == ["ref-b"]


def test_toggle_feature_flag(client, admin_headers):
    seed(FeatureFlag(flag_id="new_paywall", is_enabled=False, description="Paywall v2"))

    response = client.post("/api/feature-flags/toggle", headers=admin_headers,
                           json={"flagId": "new_paywall", "isEnabled": True})
    assert response.status_code == 200
    assert response.json()["is_enabled"] is True

    flags = client.get("/api/feature-flags", headers=admin_headers).json()
    assert [(f["flag_id"], f["is_enabled"]) for f in flags] == [("new_paywall", True)]

    missing = client.post("/api/feature-flags/toggle", headers=admin_headers,
                          json={"flagId": "nope", "isEnabled": True})
    assert missing.status_code == 404
