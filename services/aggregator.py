from __future__ import annotations

import logging
import time
from typing import List, Optional

from config import Settings, settings as default_settings
from providers.ticketmaster import FetchMode, TicketmasterProvider
from schemas import ConcertRecord
from services.music_filter import filter_music_events
from services.normalize import normalize

logger = logging.getLogger(__name__)


def _dedupe(items: List[ConcertRecord]) -> List[ConcertRecord]:
    # first occurrence of an id wins
    seen, out = set(), []
    for c in items:
        if c.id in seen:
            continue
        seen.add(c.id)
        out.append(c)
    return out


def load_concerts(
    provider: TicketmasterProvider,
    mode: FetchMode,
    keyword: Optional[str] = None,
    *,
    settings: Optional[Settings] = None,
) -> List[ConcertRecord]:
    """
    fetch -> music filter -> normalize -> drop repeated ids.
    Source errors propagate untouched; nothing is kept from a failed fetch.
    """
    s = settings or provider.settings or default_settings
    t0 = time.perf_counter()

    raw = provider.fetch_concerts(mode, keyword)
    kept = filter_music_events(raw, strict=s.strict_music_filter)
    concerts = _dedupe(normalize(kept, fallback_image=s.fallback_image_url))

    ms = int((time.perf_counter() - t0) * 1000)
    logger.info(
        "provider=%s mode=%s found=%d kept=%d ms=%d",
        provider.name, FetchMode(mode).value, len(raw), len(concerts), ms,
    )
    return concerts
