# ui/app.py
import logging

import pandas as pd
import streamlit as st

from config import settings
from providers.ticketmaster import TicketmasterProvider
from services.dashboard import (
    GENRE_OPTIONS,
    ListingViewModel,
    Notice,
    NoticeKind,
    Source,
    display_when,
    ticket_link,
)
from services.storage import open_credential_store

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# ----------------------------
# Basic page setup
# ----------------------------
st.set_page_config(page_title="Concert Finder", layout="wide")
st.title("Concert Finder")
st.caption("Your personalized music discovery dashboard")


def _new_view_model() -> ListingViewModel:
    store = open_credential_store(
        settings.credential_db_path, seed=settings.ticketmaster_api_key
    )
    return ListingViewModel(TicketmasterProvider(store, settings=settings))


# One view model per browser session, survives reruns
if "vm" not in st.session_state:
    st.session_state.vm = _new_view_model()
    st.session_state.show_settings = False
    st.session_state.notice = None

vm: ListingViewModel = st.session_state.vm


def _apply(notice: Notice) -> None:
    if notice.kind is NoticeKind.NEED_CONFIGURATION:
        st.session_state.show_settings = True
    st.session_state.notice = notice


def _show_notice(notice) -> None:
    if notice is None or not notice.message:
        return
    if notice.kind is NoticeKind.ERROR:
        st.error(notice.message)
    elif notice.kind is NoticeKind.NEED_CONFIGURATION:
        st.warning(notice.message)
    elif notice.kind is NoticeKind.NO_RESULTS:
        st.info(notice.message)
    else:
        st.success(notice.message)


# ----------------------------
# Sidebar: settings
# ----------------------------
with st.sidebar.expander("Settings", expanded=st.session_state.show_settings):
    api_key = st.text_input(
        "Ticketmaster API Key",
        value=vm.provider.credentials.get() or "",
        type="password",
        placeholder="Enter your Ticketmaster API key",
    )
    left, right = st.columns(2)
    with left:
        if st.button("Cancel", use_container_width=True):
            st.session_state.show_settings = False
            st.rerun()
    with right:
        if st.button("Save", type="primary", use_container_width=True):
            st.session_state.show_settings = False
            _apply(vm.save_credential(api_key))
            st.rerun()

# ----------------------------
# Sidebar: artist search
# ----------------------------
st.sidebar.header("Search artist")
artist = st.sidebar.text_input("Artist", value=vm.state.last_artist)
if st.sidebar.button("Search", type="primary", disabled=vm.state.loading):
    with st.spinner(f"Searching for {artist}..."):
        _apply(vm.search_artist(artist))
    st.rerun()
if vm.state.last_artist and st.sidebar.button("Clear search"):
    with st.spinner("Fetching..."):
        _apply(vm.clear_search())
    st.rerun()

# ----------------------------
# Data source banner
# ----------------------------
with st.container(border=True):
    info, actions = st.columns([0.7, 0.3])
    with info:
        if vm.state.source is Source.FETCHED:
            st.subheader("Live Concert Data")
            ts = vm.state.last_fetched.strftime("%H:%M:%S") if vm.state.last_fetched else "-"
            st.write(
                f"Currently showing live concert data from Ticketmaster API. "
                f"Last updated: {ts}"
            )
        else:
            st.subheader("Sample Data Notice")
            st.write(
                "This dashboard currently displays sample concert data. "
                'Click "Fetch Real Data" to connect to Ticketmaster API for live concert listings.'
            )
    with actions:
        if st.button("Fetch Real Data", disabled=vm.state.loading, use_container_width=True):
            with st.spinner("Fetching..."):
                _apply(vm.fetch_all())
            st.rerun()
        if vm.state.source is Source.FETCHED and st.button(
            "Use Sample Data", use_container_width=True
        ):
            vm.revert_to_sample()
            st.rerun()

_show_notice(st.session_state.notice)

# ----------------------------
# Filters
# ----------------------------
search_col, genre_col = st.columns([0.75, 0.25])
with search_col:
    vm.set_search_text(
        st.text_input("Search artists, venues...", value=vm.state.search_text)
    )
with genre_col:
    genres = list(GENRE_OPTIONS)
    vm.set_genre(
        st.selectbox(
            "Genre",
            genres,
            index=genres.index(vm.state.genre) if vm.state.genre in genres else 0,
            format_func=GENRE_OPTIONS.get,
        )
    )

# ----------------------------
# Listing
# ----------------------------
concerts = vm.visible_concerts

head, count = st.columns([0.8, 0.2])
with head:
    st.header(vm.listing_title)
with count:
    st.caption(f"{len(concerts)} concerts found")
    if concerts:
        st.download_button(
            "Download CSV",
            data=pd.DataFrame([c.model_dump(by_alias=True) for c in concerts])
            .to_csv(index=False)
            .encode("utf-8"),
            file_name="concerts.csv",
            mime="text/csv",
        )

cols = st.columns(3)
for i, c in enumerate(concerts):
    with cols[i % 3]:
        with st.container(border=True):
            st.image(c.image)
            top = st.columns([0.75, 0.25])
            with top[0]:
                st.subheader(c.artist)
                st.caption(c.genre)
            with top[1]:
                fav = vm.is_favorite(c.id)
                if st.button("♥" if fav else "♡", key=f"fav::{c.id}"):
                    vm.toggle_favorite(c.id)
                    st.rerun()
            st.write(f"📍 {c.venue}")
            st.write(f"🗓 {display_when(c)}")
            st.write(f"**{c.price}**")
            st.link_button("Tickets", ticket_link(c))
