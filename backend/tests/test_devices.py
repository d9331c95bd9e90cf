"""Test device and credential asset endpoints."""
import pytest

from conftest import seed
from opsadmin.models import Device, ICloudProfile, SocialAccount

PROFILE = {
    "email": "jamie@icloud.com",
    "credentials": "hunter2",
    "alias": "Jamie",
    "birthDate": "1998-04-12",
    "country": "US",
    "street": "12 Oak Ave",
    "city": "Denver",
    "zipCode": "80201",
}

PROXY = {"type": "SOCKS5", "host": "proxy.example.net", "port": 1080, "username": "u", "password": "p"}


@pytest.fixture
def device(client, promoter_headers) -> dict:
    response = client.post("/api/devices/create", headers=promoter_headers, json={"device_model": "iPhone 13"})
    assert response.status_code == 201
    return response.json()


def test_create_and_list_device(client, promoter_headers, device):
    assert device["device_model"] == "iPhone 13"
    assert device["manager_id"] is None

    response = client.get("/api/devices", headers=promoter_headers)
    assert response.status_code == 200
    [entry] = response.json()
    assert entry["device"]["id"] == device["id"]
    assert entry["icloud_profile"] is None
    assert entry["social_accounts"] == []


def test_update_device(client, promoter_headers, device):
    response = client.post(
        "/api/devices/update",
        headers=promoter_headers,
        json={"device_id": device["id"], "owner": "Shelf 3"},
    )
    assert response.status_code == 200
    assert response.json()["owner"] == "Shelf 3"
    assert response.json()["device_model"] == "iPhone 13"


def test_unknown_device_is_404(client, promoter_headers):
    response = client.get("/api/devices/9999", headers=promoter_headers)
    assert response.status_code == 404
    assert response.json() == {"error": "Device not found"}


def test_assets_created_on_one_device_share_a_batch(client, promoter_headers, device):
    profile = client.post("/api/icloud-profiles/create", headers=promoter_headers,
                          json={**PROFILE, "device_id": device["id"]})
    assert profile.status_code == 201
    batch_id = profile.json()["batch_id"]
    assert batch_id

    proxy = client.post("/api/proxies/create", headers=promoter_headers, json={**PROXY, "device_id": device["id"]})
    account = client.post(
        "/api/social-accounts/create",
        headers=promoter_headers,
        json={"device_id": device["id"], "platform": "Instagram", "username": "jamie.daily", "credentials": "pw"},
    )

    assert proxy.status_code == 201
    assert account.status_code == 201
    assert proxy.json()["batch_id"] == batch_id
    assert account.json()["batch_id"] == batch_id
    assert account.json()["status"] == "draft"

    detail = client.get(f"/api/devices/{device['id']}", headers=promoter_headers).json()
    assert detail["icloud_profile"]["id"] == profile.json()["id"]
    assert detail["proxy"]["id"] == proxy.json()["id"]
    assert [a["username"] for a in detail["social_accounts"]] == ["jamie.daily"]


def test_second_active_profile_is_rejected(client, promoter_headers, device):
    body = {**PROFILE, "device_id": device["id"]}
    assert client.post("/api/icloud-profiles/create", headers=promoter_headers, json=body).status_code == 201

    response = client.post("/api/icloud-profiles/create", headers=promoter_headers, json=body)
    assert response.status_code == 400
    assert "already has an active iCloud profile" in response.json()["error"]


def test_second_active_proxy_is_rejected(client, promoter_headers, device):
    body = {**PROXY, "device_id": device["id"]}
    assert client.post("/api/proxies/create", headers=promoter_headers, json=body).status_code == 201

    response = client.post("/api/proxies/create", headers=promoter_headers, json=body)
    assert response.status_code == 400
    assert "already has an active proxy" in response.json()["error"]


def test_profile_for_missing_device_is_404(client, promoter_headers):
    response = client.post("/api/icloud-profiles/create", headers=promoter_headers,
                           json={**PROFILE, "device_id": 4242})
    assert response.status_code == 404


def test_archive_then_replace_profile(client, promoter_headers, device):
    first = client.post("/api/icloud-profiles/create", headers=promoter_headers,
                        json={**PROFILE, "device_id": device["id"]}).json()

    archived = client.post("/api/icloud-profiles/archive", headers=promoter_headers, json={"profileId": first["id"]})
    assert archived.status_code == 200
    assert archived.json()["status"] == "archived"
    assert archived.json()["batch_id"] == first["batch_id"]

    second = client.post("/api/icloud-profiles/create", headers=promoter_headers,
                         json={**PROFILE, "email": "new@icloud.com", "device_id": device["id"]})
    assert second.status_code == 201

    detail = client.get(f"/api/devices/{device['id']}", headers=promoter_headers).json()
    assert detail["icloud_profile"]["email"] == "new@icloud.com"
    assert [p["id"] for p in detail["archived_icloud_profiles"]] == [first["id"]]


def test_archive_stamps_untagged_asset(client, promoter_headers):
    (device,) = seed(Device(device_model="iPhone XR"))
    untagged, _ = seed(
        SocialAccount(device_id=device.id, platform="Snapchat", username="old", credentials="pw",
                      status="active", batch_id=None),
        ICloudProfile(device_id=device.id, email="a@icloud.com", credentials="c", alias="A",
                      birth_date="2000-01-01", country="US", street="s", city="c", zip_code="z",
                      status="active", batch_id="live-batch"),
    )

    response = client.post("/api/social-accounts/archive", headers=promoter_headers,
                           json={"accountId": untagged.id})
    assert response.status_code == 200
    assert response.json()["status"] == "archived"
    assert response.json()["batch_id"] == "live-batch"


def test_archive_keeps_existing_batch(client, promoter_headers):
    (device,) = seed(Device(device_model="iPhone XR"))
    old_account, _ = seed(
        SocialAccount(device_id=device.id, platform="TikTok", username="legacy", credentials="pw",
                      status="active", batch_id="original"),
        ICloudProfile(device_id=device.id, email="a@icloud.com", credentials="c", alias="A",
                      birth_date="2000-01-01", country="US", street="s", city="c", zip_code="z",
                      status="active", batch_id="current"),
    )

    response = client.post("/api/social-accounts/archive", headers=promoter_headers,
                           json={"accountId": old_account.id})
    assert response.status_code == 200
    assert response.json()["batch_id"] == "original"


def test_promote_social_account(client, promoter_headers, device):
    account = client.post(
        "/api/social-accounts/create",
        headers=promoter_headers,
        json={"device_id": device["id"], "platform": "TikTok", "username": "dancer", "credentials": "pw"},
    ).json()

    response = client.post(
        "/api/social-accounts/update",
        headers=promoter_headers,
        json={"accountId": account["id"], "platform": "TikTok", "username": "dancer2",
              "credentials": "pw", "status": "active"},
    )
    assert response.status_code == 200
    assert response.json()["status"] == "active"
    assert response.json()["username"] == "dancer2"
    assert response.json()["batch_id"] == account["batch_id"]


def test_invalid_proxy_port_is_400(client, promoter_headers, device):
    response = client.post("/api/proxies/create", headers=promoter_headers,
                           json={**PROXY, "port": 70000, "device_id": device["id"]})
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request"
    assert any(d.startswith("port:") for d in response.json()["details"])
