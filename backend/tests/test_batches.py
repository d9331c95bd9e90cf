"""Test batch correlation of credential assets."""
import uuid
from datetime import datetime, timedelta

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from conftest import run_db, seed
from opsadmin.models import Device, ICloudProfile, Proxy, SocialAccount
from opsadmin.services.batches import group_by_batch, resolve_batch_id

T0 = datetime(2024, 3, 1, 12, 0, 0)


def _device() -> Device:
    (device,) = seed(Device(device_model="iPhone 12"))
    return device


def _profile(device_id, batch_id=None, status="active", created_at=T0):
    return ICloudProfile(
        device_id=device_id,
        email=f"{uuid.uuid4().hex[:8]}@icloud.com",
        credentials="secret",
        alias="Jamie",
        birth_date="1999-01-01",
        country="US",
        street="1 Main St",
        city="Austin",
        zip_code="73301",
        status=status,
        batch_id=batch_id,
        created_at=created_at,
    )


def _proxy(device_id, batch_id=None, status="active", created_at=T0):
    return Proxy(device_id=device_id, type="HTTP", host="10.0.0.1", port=8080,
                 status=status, batch_id=batch_id, created_at=created_at)


def _account(device_id, batch_id=None, status="draft", created_at=T0):
    return SocialAccount(device_id=device_id, platform="TikTok", username=uuid.uuid4().hex[:10],
                         credentials="pw", status=status, batch_id=batch_id, created_at=created_at)


def test_resolve_is_stable_for_tagged_device():
    device = _device()
    seed(_proxy(device.id, batch_id="batch-1"))

    first = run_db(lambda db: resolve_batch_id(db, device.id))
    second = run_db(lambda db: resolve_batch_id(db, device.id))
    assert first == second == "batch-1"


def test_profile_batch_wins_over_proxy():
    device = _device()
    seed(_proxy(device.id, batch_id="proxy-batch"), _profile(device.id, batch_id="profile-batch"))

    assert run_db(lambda db: resolve_batch_id(db, device.id)) == "profile-batch"


def test_newest_proxy_then_social_account():
    device = _device()
    seed(
        _proxy(device.id, batch_id="old", created_at=T0),
        _proxy(device.id, batch_id="new", created_at=T0 + timedelta(hours=1)),
        _account(device.id, batch_id="account-batch"),
    )
    assert run_db(lambda db: resolve_batch_id(db, device.id)) == "new"


def test_archived_and_untagged_assets_are_skipped():
    device = _device()
    seed(
        _profile(device.id, batch_id="burned", status="archived"),
        _profile(device.id, batch_id=None),
        _account(device.id, batch_id="acct", status="active"),
    )
    assert run_db(lambda db: resolve_batch_id(db, device.id)) == "acct"


def test_fresh_ids_when_nothing_is_tagged():
    device = _device()
    seed(_profile(device.id, batch_id=None), _account(device.id, batch_id="gone", status="archived"))

    first = run_db(lambda db: resolve_batch_id(db, device.id))
    second = run_db(lambda db: resolve_batch_id(db, device.id))

    assert str(uuid.UUID(first)) == first
    assert str(uuid.UUID(second)) == second
    assert first != second


def test_group_by_batch_covers_every_asset():
    device = _device()
    profiles = [
        _profile(device.id, batch_id="A", status="archived"),
        _profile(device.id, batch_id="B", status="archived"),
    ]
    accounts = [
        _account(device.id, batch_id="A", status="archived"),
        _account(device.id, batch_id="A", status="archived"),
        _account(device.id, batch_id="B", status="archived"),
        _account(device.id, batch_id=None, status="archived"),
    ]
    proxies = [_proxy(device.id, batch_id="B", status="archived")]

    groups = group_by_batch(profiles, accounts, proxies)

    assert set(groups) == {"A", "B", None}
    assert groups["A"].profile is profiles[0]
    assert len(groups["A"].social_accounts) == 2
    assert groups["B"].proxy is proxies[0]
    assert groups[None].profile is None
    assert groups[None].social_accounts == [accounts[3]]

    grouped = [asset for group in groups.values() for asset in group.assets]
    assert len(grouped) == len(profiles) + len(accounts) + len(proxies)
    assert {id(a) for a in grouped} == {id(a) for a in profiles + accounts + proxies}


def test_group_by_batch_keeps_newest_profile_in_slot():
    device = _device()
    older = _profile(device.id, batch_id="A", status="archived", created_at=T0)
    newer = _profile(device.id, batch_id="A", status="archived", created_at=T0 + timedelta(days=1))

    groups = group_by_batch([older, newer], [], [])

    assert groups["A"].profile is newer
    assert groups["A"].extra_profiles == [older]


def test_batches_endpoint_serializes_null_batch(client, promoter_headers):
    device = _device()
    seed(
        _profile(device.id, batch_id="A", status="archived"),
        _account(device.id, batch_id=None, status="archived"),
        _proxy(device.id, batch_id="live"),
    )

    response = client.get(f"/api/devices/{device.id}/batches", headers=promoter_headers)
    assert response.status_code == 200
    batches = {b["batch_id"]: b for b in response.json()["batches"]}
    assert set(batches) == {"A", "no-batch"}
    assert batches["A"]["profile"]["batch_id"] == "A"
    assert len(batches["no-batch"]["social_accounts"]) == 1


@pytest.fixture()
def failing_batch_lookup(monkeypatch):
    """Make every batch-id lookup fail as if the database went away."""
    original_execute = AsyncSession.execute

    async def execute(self, statement, *args, **kwargs):
        if "batch_id IS NOT NULL" in str(statement):
            raise OperationalError(str(statement), {}, Exception("disk I/O error"))
        return await original_execute(self, statement, *args, **kwargs)

    monkeypatch.setattr(AsyncSession, "execute", execute)
    return monkeypatch


def test_lookup_error_is_not_a_fresh_batch(failing_batch_lookup):
    device = _device()

    with pytest.raises(OperationalError):
        run_db(lambda db: resolve_batch_id(db, device.id))


def test_create_fails_with_database_error_and_inserts_nothing(client, promoter_headers, failing_batch_lookup):
    device = _device()

    response = client.post(
        "/api/proxies/create",
        headers=promoter_headers,
        json={"device_id": device.id, "type": "SOCKS5", "host": "proxy.example.net", "port": 1080},
    )

    assert response.status_code == 500
    assert response.json()["error"] == "Database error"

    failing_batch_lookup.undo()
    count = run_db(lambda db: db.scalar(select(func.count()).select_from(Proxy)))
    assert count == 0
