from __future__ import annotations

import hashlib
from typing import Any, Dict, Iterable, List, Optional

from config import FALLBACK_IMAGE_URL
from providers.base import _clean, _dig, _first
from schemas import ConcertRecord

ID_PREFIX = "tm_"
UNKNOWN_VENUE = "Unknown Venue"
DEFAULT_GENRE = "Music"
PRICE_TBA = "Price TBA"
DATE_TBA = "TBA"


def _fmt_amount(v: Any) -> str:
    # 45.0 -> "45", 45.5 -> "45.5", anything else passed through
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    return str(v)


def format_price(price_ranges: Any) -> str:
    pr = _first(price_ranges)
    if not isinstance(pr, dict):
        return PRICE_TBA
    lo, hi = pr.get("min"), pr.get("max")
    if lo is None and hi is None:
        return PRICE_TBA
    if lo is None:
        lo = hi
    if hi is None:
        hi = lo
    return f"${_fmt_amount(lo)}-{_fmt_amount(hi)}"


def _event_date(event: Dict[str, Any]) -> str:
    start = _dig(event, "dates", "start") or {}
    local = start.get("localDate")
    if local:
        return local
    dt = start.get("dateTime")
    if isinstance(dt, str) and len(dt) >= 10:
        return dt[:10]
    return DATE_TBA


def concert_id(event: Dict[str, Any]) -> str:
    raw_id = event.get("id")
    if raw_id:
        return f"{ID_PREFIX}{raw_id}"
    # no upstream id: stable hash of what identifies the show
    venue = _dig(_first(_dig(event, "_embedded", "venues")), "name")
    key = f'{event.get("name")}|{_event_date(event)}|{venue}'
    digest = hashlib.sha1(key.encode("utf-8")).hexdigest()[:16]
    return f"{ID_PREFIX}{digest}"


def normalize_event(
    event: Dict[str, Any], fallback_image: Optional[str] = None
) -> ConcertRecord:
    venue = _first(_dig(event, "_embedded", "venues"))
    cls = _first(event.get("classifications"))
    img = _first(event.get("images"))

    return ConcertRecord(
        id=concert_id(event),
        artist=_clean(event.get("name")) or "Untitled",
        venue=_clean(_dig(venue, "name")) or UNKNOWN_VENUE,
        date=_event_date(event),
        time=_dig(event, "dates", "start", "localTime") or None,
        genre=_clean(_dig(cls, "genre", "name")) or DEFAULT_GENRE,
        price=format_price(event.get("priceRanges")),
        image=_dig(img, "url") or fallback_image or FALLBACK_IMAGE_URL,
        ticket_url=event.get("url") or None,
        spotify_match=False,
        venue_type="Unknown",
    )


def normalize(
    events: Iterable[Dict[str, Any]], fallback_image: Optional[str] = None
) -> List[ConcertRecord]:
    """One ConcertRecord per raw event, same order."""
    return [normalize_event(e, fallback_image) for e in events]
