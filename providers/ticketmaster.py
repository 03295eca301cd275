from __future__ import annotations

import enum
import logging
from typing import Any, Dict, List, Optional

import requests

from config import Settings, settings as default_settings
from providers.base import (
    EmptyQueryError,
    MissingCredentialError,
    NetworkError,
    UpstreamError,
    _dig,
)
from services.storage import CredentialStore
from utils.http_client import HttpClient

KEY = "ticketmaster"

logger = logging.getLogger(__name__)


class FetchMode(str, enum.Enum):
    BROWSE = "browse"
    SEARCH = "search"


# --------- provider (SYNC) ---------


class TicketmasterProvider:
    """
    Discovery API adapter. Returns the raw event dicts of one page;
    filtering and normalizing happen downstream.
    """

    name = KEY

    def __init__(
        self,
        credentials: CredentialStore,
        client: Optional[HttpClient] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.credentials = credentials
        self.settings = settings or default_settings
        self.client = client or HttpClient(
            timeout=self.settings.http_timeout_seconds,
            max_retries=self.settings.http_max_retries,
        )

    def build_params(
        self, mode: FetchMode, api_key: str, keyword: Optional[str] = None
    ) -> Dict[str, Any]:
        s = self.settings
        params: Dict[str, Any] = {
            "city": s.default_city,
            "classificationName": "music",
            "apikey": api_key,
            "size": s.search_size if mode is FetchMode.SEARCH else s.browse_size,
            "sort": "date,asc",
        }
        if s.state_code:
            params["stateCode"] = s.state_code
        if mode is FetchMode.SEARCH:
            params["keyword"] = keyword
        return params

    def fetch_concerts(
        self, mode: FetchMode, keyword: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        mode = FetchMode(mode)

        api_key = (self.credentials.get() or "").strip()
        if not api_key:
            raise MissingCredentialError()

        if mode is FetchMode.SEARCH:
            keyword = (keyword or "").strip()
            if not keyword:
                raise EmptyQueryError()

        params = self.build_params(mode, api_key, keyword)
        url = self.settings.discovery_url

        try:
            resp = self.client.get(url, params=params)
        except requests.RequestException as e:
            logger.warning("Ticketmaster request failed: %s", e)
            raise NetworkError(f"Network error fetching {url}: {e}") from e

        if not resp.ok:
            logger.warning("Ticketmaster returned HTTP %s", resp.status_code)
            raise UpstreamError(resp.status_code, url=url)

        try:
            data = resp.json() or {}
        except ValueError as e:
            raise NetworkError(f"Non-JSON response from {url}") from e

        events = _dig(data, "_embedded", "events") or []
        logger.info("Ticketmaster %s returned %d event(s)", mode.value, len(events))
        return list(events)

    def browse(self) -> List[Dict[str, Any]]:
        return self.fetch_concerts(FetchMode.BROWSE)

    def search(self, keyword: str) -> List[Dict[str, Any]]:
        return self.fetch_concerts(FetchMode.SEARCH, keyword)
