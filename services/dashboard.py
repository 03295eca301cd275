"""
Listing view model for the concert dashboard.

Holds which listing is on screen (sample or fetched), the search/genre
filter and the favorites, and turns user intents into state transitions.
The visible list is always recomputed with `derive_visible(state, sample)`
after a transition; nothing here knows about Streamlit.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, FrozenSet, List, Optional

from providers import sample as sample_source
from providers.base import (
    ConcertSourceError,
    EmptyQueryError,
    MissingCredentialError,
)
from providers.ticketmaster import FetchMode, TicketmasterProvider
from schemas import ConcertRecord
from services.aggregator import load_concerts

logger = logging.getLogger(__name__)

ALL_GENRES = "all"
GENRE_OPTIONS = {
    "all": "All Genres",
    "indie": "Indie",
    "rock": "Rock",
    "pop": "Pop",
    "country": "Country",
}


class Source(str, enum.Enum):
    SAMPLE = "sample"
    FETCHED = "fetched"


class NoticeKind(str, enum.Enum):
    LOADED = "loaded"
    NO_RESULTS = "no_results"
    NEED_CONFIGURATION = "need_configuration"
    ERROR = "error"
    IGNORED = "ignored"
    SAVED = "saved"


@dataclass(frozen=True)
class Notice:
    kind: NoticeKind
    message: str = ""
    count: int = 0


@dataclass
class ViewState:
    source: Source = Source.SAMPLE
    search_text: str = ""
    genre: str = ALL_GENRES
    last_artist: str = ""
    loading: bool = False
    last_fetched: Optional[datetime] = None
    concerts: List[ConcertRecord] = field(default_factory=list)


# ---------- pure helpers ----------


def _matches(concert: ConcertRecord, search_text: str, genre: str) -> bool:
    q = search_text.lower()
    matches_search = q in concert.artist.lower() or q in concert.venue.lower()
    matches_genre = genre == ALL_GENRES or genre.lower() in concert.genre.lower()
    return matches_search and matches_genre


def current_listing(
    state: ViewState, sample: List[ConcertRecord]
) -> List[ConcertRecord]:
    return state.concerts if state.source is Source.FETCHED else sample


def derive_visible(
    state: ViewState, sample: List[ConcertRecord]
) -> List[ConcertRecord]:
    listing = current_listing(state, sample)
    # artist search results are already scoped
    if state.last_artist:
        return list(listing)
    return [c for c in listing if _matches(c, state.search_text, state.genre)]


def toggle(favorites: FrozenSet[str], concert_id: str) -> FrozenSet[str]:
    if concert_id in favorites:
        return favorites - {concert_id}
    return favorites | {concert_id}


def ticket_link(concert: ConcertRecord) -> str:
    return concert.ticket_url or "#"


def display_when(concert: ConcertRecord) -> str:
    """'Tue, Jul 15 • 8:00 PM'; unparseable dates are shown as-is."""
    try:
        d = datetime.strptime(concert.date, "%Y-%m-%d")
        when = f"{d:%a, %b} {d.day}"
    except ValueError:
        when = concert.date
    if concert.time:
        when += f" • {concert.time}"
    return when


# ---------- view model ----------


class ListingViewModel:
    def __init__(
        self,
        provider: TicketmasterProvider,
        sample: Optional[List[ConcertRecord]] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.provider = provider
        self.sample = list(sample) if sample is not None else sample_source.load()
        self.state = ViewState()
        self.favorites: FrozenSet[str] = frozenset()
        self._clock = clock

    # --- derived ---

    @property
    def visible_concerts(self) -> List[ConcertRecord]:
        return derive_visible(self.state, self.sample)

    @property
    def listing_title(self) -> str:
        if self.state.source is Source.SAMPLE:
            return "Sample Concerts"
        if self.state.last_artist:
            return f"Results for {self.state.last_artist}"
        return f"Live {self.provider.settings.default_city} Concerts"

    @property
    def has_credential(self) -> bool:
        return bool((self.provider.credentials.get() or "").strip())

    # --- fetch transitions ---

    def fetch_all(self) -> Notice:
        return self._run(FetchMode.BROWSE)

    def search_artist(self, name: str) -> Notice:
        name = (name or "").strip()
        if not name:
            return Notice(NoticeKind.IGNORED, "Enter an artist name to search")
        return self._run(FetchMode.SEARCH, name)

    def clear_search(self) -> Notice:
        if self.state.loading:
            return Notice(NoticeKind.IGNORED, "A fetch is already running")
        self.state.last_artist = ""
        self.state.search_text = ""
        return self.fetch_all()

    def _run(self, mode: FetchMode, keyword: Optional[str] = None) -> Notice:
        if self.state.loading:
            return Notice(NoticeKind.IGNORED, "A fetch is already running")

        self.state.loading = True
        try:
            concerts = load_concerts(self.provider, mode, keyword)
        except MissingCredentialError:
            return Notice(
                NoticeKind.NEED_CONFIGURATION,
                "Please enter your Ticketmaster API key in Settings first!",
            )
        except EmptyQueryError:
            return Notice(NoticeKind.IGNORED, "Enter an artist name to search")
        except ConcertSourceError as e:
            logger.error("Error fetching concerts: %s", e)
            return Notice(
                NoticeKind.ERROR,
                "Failed to fetch concerts. Please check your API key.",
            )
        finally:
            self.state.loading = False

        self.state.concerts = concerts
        self.state.source = Source.FETCHED
        self.state.last_artist = keyword or ""
        self.state.last_fetched = self._clock()

        if not concerts:
            if keyword:
                return Notice(NoticeKind.NO_RESULTS, f"No concerts found for {keyword}")
            return Notice(NoticeKind.NO_RESULTS, "No concerts found")
        logger.info("Fetched %d concerts", len(concerts))
        return Notice(
            NoticeKind.LOADED, f"Fetched {len(concerts)} concerts", count=len(concerts)
        )

    # --- local transitions ---

    def revert_to_sample(self) -> None:
        self.state.source = Source.SAMPLE
        self.state.last_artist = ""

    def set_search_text(self, text: str) -> None:
        self.state.search_text = text or ""

    def set_genre(self, genre: str) -> None:
        self.state.genre = genre or ALL_GENRES

    def toggle_favorite(self, concert_id: str) -> bool:
        """Flip membership; returns whether the concert is now a favorite."""
        self.favorites = toggle(self.favorites, concert_id)
        return concert_id in self.favorites

    def is_favorite(self, concert_id: str) -> bool:
        return concert_id in self.favorites

    def save_credential(self, value: str) -> Notice:
        value = (value or "").strip()
        if not value:
            return Notice(NoticeKind.IGNORED)
        self.provider.credentials.set(value)
        return Notice(NoticeKind.SAVED, "API key saved")
