from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ConcertRecord(BaseModel):
    """One concert card, whatever listing it came from."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    artist: str
    venue: str
    date: str = Field(..., description="ISO date e.g. 2025-09-01")
    time: Optional[str] = None
    genre: str
    price: str
    image: str
    ticket_url: Optional[str] = Field(default=None, alias="ticketUrl")
    spotify_match: bool = Field(default=False, alias="spotifyMatch")
    venue_type: str = Field(default="Unknown", alias="venueType")
