"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from slack_relay.app import app
from slack_relay.models.export import NamedDocument


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def users_document() -> NamedDocument:
    """A users.json with one fully populated user and one name-only user."""
    return NamedDocument(
        name="users.json",
        content=[
            {
                "id": "U1",
                "name": "alice",
                "real_name": "Alice Liddell",
                "profile": {
                    "display_name": "Alice",
                    "display_name_normalized": "Alice",
                    "real_name": "Alice Liddell",
                },
            },
            {"id": "U2", "name": "bob", "profile": {}},
        ],
    )
