"""Shared HTTP session for timedtext (transcript) requests."""

import requests

_session: requests.Session | None = None


def get_session() -> requests.Session:
    """Return a shared requests.Session for youtube.com transcript fetches.

    No retry adapter is mounted.
    """
    global _session
    if _session is None:
        _session = requests.Session()
    return _session
