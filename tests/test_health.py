"""Database health check service and endpoint."""

from __future__ import annotations

import pytest
from starlette.testclient import TestClient

import main
from core import db
from health import service
from health.service import DbStatus


@pytest.fixture
def db_up(monkeypatch) -> list[str]:
    queries: list[str] = []

    async def fetch_one(sql, *args):
        queries.append(sql)
        return {"ok": 1}

    monkeypatch.setattr(db, "fetch_one", fetch_one)
    return queries


@pytest.fixture
def db_down(monkeypatch) -> None:
    async def fetch_one(sql, *args):
        raise db.StorageError()

    monkeypatch.setattr(db, "fetch_one", fetch_one)


@pytest.mark.asyncio
async def test_check_is_up_when_probe_succeeds(db_up):
    assert await service.check() is DbStatus.UP
    assert db_up == ["SELECT 1 AS ok"]


@pytest.mark.asyncio
async def test_check_is_down_when_probe_fails(db_down, caplog):
    assert await service.check() is DbStatus.DOWN
    assert any("health_check_failed" in r.getMessage() for r in caplog.records)


@pytest.mark.asyncio
async def test_check_is_down_without_pool(monkeypatch):
    monkeypatch.setattr(db, "_pool", None)

    assert await service.check() is DbStatus.DOWN


def test_health_endpoint_up(db_up):
    resp = TestClient(main.app).get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "UP"}


def test_health_endpoint_down(db_down):
    resp = TestClient(main.app).get("/health")
    assert resp.status_code == 503
    assert resp.json() == {"status": "DOWN"}
