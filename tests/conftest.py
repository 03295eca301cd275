from __future__ import annotations

from typing import Any, Dict, List
from unittest.mock import MagicMock

import pytest

from config import Settings
from providers.ticketmaster import TicketmasterProvider
from services.storage import MemoryCredentialStore


def make_response(status: int = 200, payload: Any = None) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    resp.ok = 200 <= status < 300
    resp.json.return_value = payload if payload is not None else {}
    return resp


def embedded(events: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"_embedded": {"events": events}}


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        default_city="New York",
        state_code=None,
        strict_music_filter=False,
        http_max_retries=0,
    )


@pytest.fixture
def client() -> MagicMock:
    c = MagicMock()
    c.get.return_value = make_response(200, embedded([]))
    return c


@pytest.fixture
def provider(client, test_settings) -> TicketmasterProvider:
    return TicketmasterProvider(
        MemoryCredentialStore("test-key"), client=client, settings=test_settings
    )


@pytest.fixture
def indie_night() -> Dict[str, Any]:
    return {
        "id": "42",
        "name": "Indie Night",
        "classifications": [{"genre": {"name": "Indie Rock"}}],
        "dates": {"start": {"localDate": "2025-09-01"}},
    }


@pytest.fixture
def full_event() -> Dict[str, Any]:
    return {
        "id": "G5vYZ9",
        "name": "Phoebe Bridgers",
        "url": "https://www.ticketmaster.com/event/G5vYZ9",
        "_embedded": {"venues": [{"name": "Madison Square Garden"}]},
        "classifications": [
            {
                "segment": {"name": "Music"},
                "genre": {"name": "Alternative"},
                "subGenre": {"name": "Alternative Rock"},
            }
        ],
        "dates": {"start": {"localDate": "2025-10-12", "localTime": "19:30:00"}},
        "priceRanges": [{"min": 49.5, "max": 125.0, "currency": "USD"}],
        "images": [{"url": "https://s1.ticketm.net/img/phoebe.jpg"}],
    }
