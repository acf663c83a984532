"""Shared test fixtures and configuration."""

import os
from pathlib import Path
import sys

import pytest


SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """Keep developer MAGLO_SEARCH_* variables out of the tests."""
    for key in list(os.environ):
        if key.upper().startswith("MAGLO_SEARCH_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_trace_context():
    from maglo_search.observability.context import trace_context

    token = trace_context.set(None)
    yield
    trace_context.reset(token)


@pytest.fixture
def people_rows():
    return [
        {"id": 1, "name": "Acme Corp", "email": "billing@acme.example", "status": "Paid"},
        {"id": 2, "name": "Bravo LLC", "email": "finance@bravo.example", "status": "Pending"},
        {"id": 3, "name": "John Doe Smith", "email": "john@doe.example", "status": "Paid (partial)"},
        {"id": 4, "name": "John Only", "email": "only@example.com", "status": "Overdue"},
    ]


@pytest.fixture
def people_fields():
    def get_fields(row):
        return {"name": row["name"], "email": row["email"], "status": row["status"]}

    return get_fields
