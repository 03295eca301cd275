from __future__ import annotations

import re
from typing import Any, Optional

# Error kinds raised by concert sources. Callers catch ConcertSourceError.


class ConcertSourceError(Exception):
    pass


class MissingCredentialError(ConcertSourceError):
    """No API credential configured; the user has to open settings."""

    def __init__(self, message: str = "No Ticketmaster API key configured") -> None:
        super().__init__(message)


class EmptyQueryError(ConcertSourceError):
    def __init__(self, message: str = "Search text is empty") -> None:
        super().__init__(message)


class UpstreamError(ConcertSourceError):
    def __init__(self, status: int, url: Optional[str] = None) -> None:
        self.status = status
        self.url = url
        super().__init__(f"API Error: {status}")


class NetworkError(ConcertSourceError):
    pass


# Helpers shared by source parsers

_ws_re = re.compile(r"\s+")


def _clean(s: Optional[str]) -> Optional[str]:
    if not s:
        return None
    return _ws_re.sub(" ", s).strip() or None


def _first(x: Any) -> Any:
    return x[0] if isinstance(x, list) and x else None


def _dig(d: Any, *keys: str) -> Any:
    """Walk nested dicts, returning None as soon as a level is missing."""
    for k in keys:
        if not isinstance(d, dict):
            return None
        d = d.get(k)
    return d
