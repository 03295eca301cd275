"""
Service package marker.

Intentionally empty to avoid heavy imports at package import time.
Import the concrete modules directly, e.g.:

    from services.dashboard import ListingViewModel
    from services.storage import open_credential_store
    from services.aggregator import load_concerts
"""
__all__: list[str] = []
