from providers.ticketmaster import FetchMode
from services.aggregator import load_concerts

from conftest import embedded, make_response


def _events():
    return [
        {"id": "1", "name": "Les Misérables",
         "classifications": [{"segment": {"name": "Arts & Theatre"}}]},
        {"id": "2", "name": "Open Mic",
         "classifications": [{"segment": {"name": "Miscellaneous"}}]},
        {"id": "3", "name": "Broadway Karaoke",
         "classifications": [{"segment": {"name": "Miscellaneous"}}]},
    ]


def test_pipeline_filters_then_normalizes(provider, client):
    client.get.return_value = make_response(200, embedded(_events()))
    out = load_concerts(provider, FetchMode.BROWSE)
    # "Les Misérables" has no theatre term in its name, so it is kept
    assert [c.id for c in out] == ["tm_1", "tm_2"]
    assert all(c.genre == "Music" for c in out)


def test_pipeline_strict_filter(provider, client, test_settings):
    client.get.return_value = make_response(200, embedded(_events()))
    strict = test_settings.model_copy(update={"strict_music_filter": True})
    assert load_concerts(provider, FetchMode.BROWSE, settings=strict) == []


def test_pipeline_uses_configured_fallback_image(provider, client, test_settings):
    client.get.return_value = make_response(200, embedded(_events()[1:2]))
    s = test_settings.model_copy(update={"fallback_image_url": "https://img.example/x.png"})
    out = load_concerts(provider, FetchMode.SEARCH, "Open", settings=s)
    assert out[0].image == "https://img.example/x.png"


def test_pipeline_keeps_ids_unique(provider, client):
    events = [
        {"id": "X", "name": "Band X"},
        {"id": "X", "name": "Band X"},
        {"name": "No Id Band", "dates": {"start": {"localDate": "2025-09-01"}}},
        {"name": "No Id Band", "dates": {"start": {"localDate": "2025-09-01"}}},
        {"name": "No Id Band", "dates": {"start": {"localDate": "2025-09-02"}}},
    ]
    client.get.return_value = make_response(200, embedded(events))
    out = load_concerts(provider, FetchMode.BROWSE)
    ids = [c.id for c in out]
    assert len(ids) == len(set(ids)) == 3
    assert ids[0] == "tm_X"
    assert "tm_" not in ids
    assert all(i.startswith("tm_") for i in ids)
