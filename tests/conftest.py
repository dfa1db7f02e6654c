"""
Shared test fixtures and configuration for gift card catalog tests.

The `client` fixture comes from pytest-flask, built on the `app` fixture below.
"""
from pathlib import Path

import pytest
from flask import Flask

from giftcards import create_app
from giftcards.storage.json_store import JsonStore


@pytest.fixture(scope="session")
def app() -> Flask:
    """Create and configure a test Flask application instance."""
    app = create_app()
    app.config.update({
        "TESTING": True,
    })
    yield app


@pytest.fixture
def gifts_file(tmp_path: Path) -> Path:
    """Path of the catalog file inside a temporary data directory."""
    return tmp_path / "data" / "gifts.json"


@pytest.fixture
def json_store(gifts_file: Path) -> JsonStore:
    """Create a JsonStore instance backed by a temporary file."""
    return JsonStore(gifts_file)


@pytest.fixture
def api_store(json_store: JsonStore, mocker) -> JsonStore:
    """Point the API and page routes at the temporary store."""
    mocker.patch("giftcards.routes.gifts_api.store", json_store)
    mocker.patch("giftcards.routes.pages.store", json_store)
    return json_store


@pytest.fixture
def seeded_store(api_store: JsonStore) -> JsonStore:
    """Temporary store pre-filled with gift cards 1 and 2."""
    api_store.save_all([
        make_gift(1, name="Spa Day", category="wellness", price=50.0),
        make_gift(2, name="Cinema Night", category="leisure", price=25.5),
    ])
    return api_store


@pytest.fixture
def valid_payload() -> dict:
    return {
        "name": "Spa Day",
        "category": "wellness",
        "validity": "30 days",
        "price": 50,
        "imageReference": "spa.png",
    }


@pytest.fixture
def gift_factory():
    """Factory for stored gift card records."""
    return make_gift


# Helper functions for tests

def make_gift(gift_id: int, **overrides) -> dict:
    """Build a stored gift card record."""
    gift = {
        "id": gift_id,
        "name": f"Gift {gift_id}",
        "category": "general",
        "validity": "1 year",
        "price": 10.0,
        "imageReference": f"gift-{gift_id}.png",
    }
    gift.update(overrides)
    return gift
