# providers/sample.py
from __future__ import annotations

from typing import List

from schemas import ConcertRecord


# Sample ids are small integers; fetched ids always carry the "tm_" prefix.
SAMPLE_CONCERTS: List[ConcertRecord] = [
    ConcertRecord(
        id="1",
        artist="The National",
        venue="Brooklyn Bowl",
        date="2025-07-15",
        time="8:00 PM",
        genre="Indie Rock",
        price="$45-65",
        image="https://images.unsplash.com/photo-1493225457124-a3eb161ffa5f?w=400&h=300&fit=crop",
        spotify_match=True,
        venue_type="Intimate",
    ),
    ConcertRecord(
        id="2",
        artist="HAIM",
        venue="Webster Hall",
        date="2025-08-02",
        time="8:30 PM",
        genre="Pop Rock",
        price="$55-75",
        image="https://images.unsplash.com/photo-1470225620780-dba8ba36b745?w=400&h=300&fit=crop",
        spotify_match=True,
        venue_type="Mid-size",
    ),
]


def load() -> List[ConcertRecord]:
    """Always returns the same predictable sample listing."""
    return list(SAMPLE_CONCERTS)
