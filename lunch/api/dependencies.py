"""Collaborators injected into request handlers; tests replace them via app.dependency_overrides."""
from datetime import date

from lunch.infra.Feed_Client import FeedFetcher, fetch_raw_feed


def get_feed_fetcher() -> FeedFetcher:
    return fetch_raw_feed


def get_today() -> date:
    """Today in server-local time."""
    return date.today()
