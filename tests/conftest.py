"""Shared fixtures for the item-catalog test suite."""

from __future__ import annotations

import pytest
from starlette.testclient import TestClient

import main
from fakes import InMemoryItemRepository, RecordingSubscriber
from items import service


@pytest.fixture
def repository(monkeypatch) -> InMemoryItemRepository:
    repo = InMemoryItemRepository()
    monkeypatch.setattr(service, "repository", repo)
    return repo


@pytest.fixture
def subscriber(monkeypatch) -> RecordingSubscriber:
    recorder = RecordingSubscriber()
    monkeypatch.setattr(service, "subscriber", recorder)
    return recorder


@pytest.fixture
def client(repository, subscriber) -> TestClient:
    # No context manager: the lifespan (and its DB pool) is not started.
    return TestClient(main.app)
