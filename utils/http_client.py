from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional
import logging
import os

from requests import Response, Session
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry


logger = logging.getLogger(__name__)


def _build_retry(total: int = 0, backoff_factor: float = 0.6) -> Retry:
    """
    urllib3 Retry for transient HTTP errors.
    total=0 disables retrying; the response is handed back as-is.
    """
    return Retry(
        total=total,
        read=total,
        connect=total,
        status=total,
        backoff_factor=backoff_factor,
        status_forcelist=(500, 502, 503, 504),
        allowed_methods=frozenset({"HEAD", "GET", "OPTIONS"}),
        raise_on_status=False,
    )


class HttpClient:
    """
    Small wrapper around requests.Session with sane defaults:
    - Optional retries + backoff
    - Per-request timeout
    - JSON Accept header
    """

    def __init__(
        self,
        timeout: float = 15.0,
        max_retries: int = 0,
        user_agent: Optional[str] = None,
    ) -> None:
        self._timeout = timeout
        self._session = Session()

        adapter = HTTPAdapter(max_retries=_build_retry(total=max_retries))
        self._session.mount("http://", adapter)
        self._session.mount("https://", adapter)

        ua = user_agent or os.getenv(
            "HTTP_USER_AGENT", "ConcertFinder/1.0 (+https://example.com)"
        )
        self._default_headers: dict[str, str] = {
            "User-Agent": ua,
            "Accept": "application/json, text/plain;q=0.9, */*;q=0.8",
        }

    @property
    def session(self) -> Session:
        return self._session

    def get(
        self,
        url: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> Response:
        merged: MutableMapping[str, str] = dict(self._default_headers)
        if headers:
            merged.update(headers)
        t = timeout or self._timeout
        logger.debug("GET %s params=%s", url, _redact(params))
        return self._session.get(url, params=params, headers=merged, timeout=t)


def _redact(params: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    # keep credentials out of the logs
    out = dict(params or {})
    if "apikey" in out:
        out["apikey"] = "***"
    return out
