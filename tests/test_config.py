from config import FALLBACK_IMAGE_URL, Settings


def test_defaults(monkeypatch):
    for var in ("DEFAULT_CITY", "STATE_CODE", "TICKETMASTER_API_KEY",
                "HTTP_MAX_RETRIES", "STRICT_MUSIC_FILTER"):
        monkeypatch.delenv(var, raising=False)
    s = Settings(_env_file=None)
    assert s.default_city == "New York"
    assert s.state_code is None
    assert s.browse_size == 50
    assert s.search_size == 20
    assert s.http_max_retries == 0
    assert s.strict_music_filter is False
    assert s.fallback_image_url == FALLBACK_IMAGE_URL
    assert s.discovery_url.endswith("/discovery/v2/events.json")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DEFAULT_CITY", "Chicago")
    monkeypatch.setenv("STATE_CODE", "IL")
    monkeypatch.setenv("STRICT_MUSIC_FILTER", "true")
    monkeypatch.setenv("TICKETMASTER_API_KEY", "env-key")
    s = Settings(_env_file=None)
    assert s.default_city == "Chicago"
    assert s.state_code == "IL"
    assert s.strict_music_filter is True
    assert s.ticketmaster_api_key == "env-key"
