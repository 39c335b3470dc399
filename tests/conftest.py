from unittest.mock import AsyncMock

import asyncpg
import pytest


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("DB_USER", "labber")
    monkeypatch.setenv("DB_PASSWORD", "test-password")
    monkeypatch.setenv("DB_HOST", "db.test")
    monkeypatch.setenv("DB_NAME", "lightbnb_test")


@pytest.fixture
def pool():
    mock = AsyncMock(spec=asyncpg.Pool)
    mock.fetchrow.return_value = None
    mock.fetch.return_value = []
    return mock


@pytest.fixture
def property_row():
    return {
        "id": 7,
        "owner_id": 3,
        "title": "Cozy loft",
        "description": "Close to the seawall",
        "thumbnail_photo_url": "https://example.com/thumb.jpg",
        "cover_photo_url": "https://example.com/cover.jpg",
        "cost_per_night": 12500,
        "parking_spaces": 1,
        "number_of_bathrooms": 1,
        "number_of_bedrooms": 2,
        "country": "Canada",
        "street": "123 Denman St",
        "city": "Vancouver",
        "province": "BC",
        "post_code": "V6G 2L6",
        "active": True,
    }
