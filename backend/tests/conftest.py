from __future__ import annotations

import asyncio
import os
import tempfile
from datetime import datetime, timedelta
from typing import Generator

# Point the app at a throwaway SQLite file before anything imports the settings
os.environ["DATA_PATH"] = tempfile.mkdtemp(prefix="opsadmin-tests-")
os.environ.pop("DATABASE_URL", None)
os.environ["JWT_SECRET"] = "opsadmin-test-signing-key-0123456789abcdef"
os.environ["JWT_AUDIENCE"] = "authenticated"

import jwt
import pytest
from fastapi.testclient import TestClient

from opsadmin import models  # noqa: F401
from opsadmin.config import settings
from opsadmin.database import Base, async_session, engine
from opsadmin.main import app
from opsadmin.models import UserRole


def run_db(fn):
    """Run ``await fn(session)`` on a fresh event loop and return its result."""
    async def _run():
        try:
            async with async_session() as session:
                return await fn(session)
        finally:
            # Pooled connections must not outlive the loop that opened them
            await engine.dispose()

    return asyncio.run(_run())


def seed(*objects):
    """Insert ORM objects and return them with defaults populated."""
    async def _add(session):
        session.add_all(objects)
        await session.commit()
        return objects

    return run_db(_add)


def make_token(user_id: str, expires_in: timedelta = timedelta(hours=1), **claims) -> str:
    payload = {
        "sub": user_id,
        "aud": settings.jwt_audience,
        "exp": datetime.utcnow() + expires_in,
        **claims,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def auth_headers(user_id: str, role: str | None) -> dict:
    if role is not None:
        seed(UserRole(user_id=user_id, role=role))
    return {"Authorization": f"Bearer {make_token(user_id)}"}


@pytest.fixture(autouse=True)
def reset_database() -> None:
    async def _reset():
        try:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.drop_all)
                await conn.run_sync(Base.metadata.create_all)
        finally:
            await engine.dispose()

    asyncio.run(_reset())


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def admin_headers() -> dict:
    return auth_headers("00000000-0000-0000-0000-00000000a001", "admin")


@pytest.fixture()
def promoter_headers() -> dict:
    return auth_headers("00000000-0000-0000-0000-00000000b001", "promoter")
