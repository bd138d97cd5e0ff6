"""Shared fixtures: isolated data directories, stores and an API client."""

from __future__ import annotations

import os

import pytest

# The limiter's in-memory counters live for the whole test session.
os.environ["RATE_LIMIT_ENABLED"] = "false"

from models.expense import Expense  # noqa: E402
from models.group import Group  # noqa: E402
from services.document_store import DocumentStore  # noqa: E402


@pytest.fixture()
def expenses_store(tmp_path) -> DocumentStore[Expense]:
    return DocumentStore(tmp_path / "expenses.json", Expense)


@pytest.fixture()
def groups_store(tmp_path) -> DocumentStore[Group]:
    return DocumentStore(tmp_path / "groups.json", Group)


@pytest.fixture()
def data_dir(tmp_path, monkeypatch: pytest.MonkeyPatch):
    path = tmp_path / "data"
    monkeypatch.setenv("DATA_DIR", str(path))
    return path


@pytest.fixture()
def client(data_dir):
    from fastapi.testclient import TestClient

    from main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def rent_payload() -> dict:
    return {
        "description": "Rent",
        "category": "home",
        "amount": "500",
        "date": "2024-01-01",
        "status": "unpaid",
    }
