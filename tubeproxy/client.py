"""Read-only YouTube Data API client authenticated with an API key."""

import logging

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from tubeproxy.exceptions import UpstreamError

logger = logging.getLogger(__name__)

# Largest page the Data API serves for list calls
PAGE_SIZE = 50


class YouTubeClient:
    def __init__(self, api_key: str):
        self._service = build("youtube", "v3", developerKey=api_key, cache_discovery=False)

    def get(self, resource: str, params: dict) -> dict:
        """Issue one ``list`` call on a collection (videos, search, channels, ...).

        Raises UpstreamError with the HTTP status when the call fails. No retries.
        """
        logger.debug("GET %s %s", resource, params)
        collection = getattr(self._service, resource)()
        try:
            return collection.list(**params).execute()
        except HttpError as e:
            status = e.resp.status
            raise UpstreamError(f"YouTube API error ({status}): {e.reason}", upstream_status=status) from e

    def list_items(self, resource: str, params: dict, limit: int) -> list[dict]:
        """Collect up to ``limit`` items, following nextPageToken across pages."""
        items: list[dict] = []
        page_token = None
        while len(items) < limit:
            page_params = {**params, "maxResults": min(PAGE_SIZE, limit - len(items))}
            if page_token:
                page_params["pageToken"] = page_token
            page = self.get(resource, page_params)
            page_items = page.get("items", [])
            items.extend(page_items)
            page_token = page.get("nextPageToken")
            if not page_token or not page_items:
                break
        return items[:limit]
