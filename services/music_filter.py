"""
Keep music events, drop theatre that slipped in under the music classification.

An event is kept when any of these holds:
  a. the top-level classification segment is "music"
  b. its genre name contains one of MUSIC_GENRE_TERMS
  c. its sub-genre name contains one of MUSIC_SUBGENRE_TERMS
  d. the event name contains none of THEATRE_TERMS

Rule (d) lets through nearly every event whose name is not obviously a show,
whatever its classification. strict=True evaluates (a)-(c) only.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List

from providers.base import _dig, _first

logger = logging.getLogger(__name__)

MUSIC_GENRE_TERMS = (
    "rock", "pop", "country", "folk", "indie", "electronic",
    "hip", "rap", "jazz", "blues", "alternative",
)
MUSIC_SUBGENRE_TERMS = ("rock", "pop", "country")
THEATRE_TERMS = (
    "hamilton", "harry potter", "broadway", "musical", "theater", "theatre",
)


def _contains_any(text: str, terms: Iterable[str]) -> bool:
    t = text.lower()
    return any(term in t for term in terms)


def _top_level_name(event: Dict[str, Any], field: str) -> str:
    name = _dig(_first(event.get("classifications")), field, "name")
    return name if isinstance(name, str) else ""


def is_classified_music(event: Dict[str, Any]) -> bool:
    if _top_level_name(event, "segment").lower() == "music":
        return True
    if _contains_any(_top_level_name(event, "genre"), MUSIC_GENRE_TERMS):
        return True
    return _contains_any(_top_level_name(event, "subGenre"), MUSIC_SUBGENRE_TERMS)


def looks_like_theatre(event: Dict[str, Any]) -> bool:
    return _contains_any(event.get("name") or "", THEATRE_TERMS)


def is_music_event(event: Dict[str, Any], *, strict: bool = False) -> bool:
    if is_classified_music(event):
        return True
    if strict:
        return False
    return not looks_like_theatre(event)


def filter_music_events(
    events: Iterable[Dict[str, Any]], *, strict: bool = False
) -> List[Dict[str, Any]]:
    """Order-preserving; running it twice gives the same list."""
    kept = []
    for event in events:
        if is_music_event(event, strict=strict):
            kept.append(event)
        else:
            logger.debug("Filtered out non-music event: %s", event.get("name"))
    return kept
