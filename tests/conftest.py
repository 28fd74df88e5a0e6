import pytest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from tubeproxy.config import get_settings

requires_youtube = pytest.mark.skipif(
    not get_settings().youtube_api_key,
    reason="YouTube API key not configured; set YOUTUBE_API_KEY in .env",
)


# --- Canned API responses ---

VIDEO_API_ITEM = {
    "kind": "youtube#video",
    "etag": "etag123",
    "id": "vid123",
    "snippet": {
        "title": "Intro to Python",
        "description": "Learn Python basics",
        "channelId": "chan456",
        "channelTitle": "Code Channel",
        "publishedAt": "2025-01-01T00:00:00Z",
        "thumbnails": {
            "default": {"url": "https://i.ytimg.com/vi/vid123/default.jpg"},
            "high": {"url": "https://i.ytimg.com/vi/vid123/hqdefault.jpg"},
        },
    },
    "contentDetails": {"duration": "PT10M30S"},
    "statistics": {
        "viewCount": "1500",
        "likeCount": "120",
        "commentCount": "8",
        "favoriteCount": "0",
    },
}

SEARCH_API_RESULT = {
    "items": [
        {
            "id": {"kind": "youtube#video", "videoId": f"vid{i}"},
            "snippet": {
                "title": f"Result {i}",
                "description": "",
                "channelTitle": "Code Channel",
                "publishedAt": "2025-01-02T00:00:00Z",
                "thumbnails": {"medium": {"url": f"https://i.ytimg.com/vi/vid{i}/mqdefault.jpg"}},
            },
        }
        for i in range(3)
    ],
}

CHANNEL_API_ITEM = {
    "id": "chan456",
    "snippet": {
        "title": "Code Channel",
        "description": "Programming videos",
        "customUrl": "@codechannel",
        "publishedAt": "2020-05-01T00:00:00Z",
        "country": "US",
        "thumbnails": {"default": {"url": "https://yt3.ggpht.com/chan456"}},
    },
    "statistics": {"subscriberCount": "1000", "videoCount": "42", "viewCount": "99999"},
    "contentDetails": {"relatedPlaylists": {"likes": "", "uploads": "UUchan456"}},
}

PLAYLIST_API_ITEM = {
    "id": "PL789",
    "snippet": {
        "title": "Python Course",
        "description": "Full course",
        "channelId": "chan456",
        "channelTitle": "Code Channel",
        "publishedAt": "2024-03-01T00:00:00Z",
        "thumbnails": {"high": {"url": "https://i.ytimg.com/pl789.jpg"}},
    },
    "contentDetails": {"itemCount": 12},
}


def playlist_item(position: int, playlist_id: str = "PL789") -> dict:
    return {
        "id": f"{playlist_id}-item{position}",
        "snippet": {
            "title": f"Lesson {position}",
            "description": "",
            "position": position,
            "channelTitle": "Code Channel",
            "videoOwnerChannelTitle": "Code Channel",
            "publishedAt": "2024-03-02T00:00:00Z",
            "resourceId": {"kind": "youtube#video", "videoId": f"v{position}"},
            "thumbnails": {},
        },
        "contentDetails": {"videoId": f"v{position}", "videoPublishedAt": "2024-02-01T00:00:00Z"},
    }


def playlist_pages(total: int, page_size: int) -> list[dict]:
    """Split ``total`` items into upstream-shaped pages linked by nextPageToken."""
    pages = []
    for start in range(0, total, page_size):
        page = {"items": [playlist_item(i) for i in range(start, min(start + page_size, total))]}
        if start + page_size < total:
            page["nextPageToken"] = f"token{start + page_size}"
        pages.append(page)
    return pages


@pytest.fixture
def mock_build(mocker):
    mock_svc = MagicMock()
    mocker.patch("tubeproxy.client.build", return_value=mock_svc)
    return mock_svc


@pytest.fixture
def youtube_client(mock_build):
    """YouTubeClient backed by a mocked discovery resource."""
    from tubeproxy.client import YouTubeClient
    return YouTubeClient("test-key")


@pytest.fixture
def mock_client():
    """Stand-in for YouTubeClient, for service tests."""
    return MagicMock()


@pytest.fixture
def api_client():
    """FastAPI TestClient for router tests. Dependency overrides are reset afterwards."""
    from tubeproxy.main import api
    yield TestClient(api, raise_server_exceptions=False)
    api.dependency_overrides.clear()
