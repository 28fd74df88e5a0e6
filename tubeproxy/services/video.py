from collections.abc import Sequence

from tubeproxy.client import PAGE_SIZE, YouTubeClient
from tubeproxy.exceptions import NotFoundError, ValidationError
from tubeproxy.models.video import VideoStats, VideoSummary
from tubeproxy.services.common import best_thumbnail, count, require, resolve_limit, video_url

DEFAULT_PARTS = ("snippet", "contentDetails")
DEFAULT_SEARCH_RESULTS = 10

VIDEO_PARTS = frozenset({
    "contentDetails",
    "fileDetails",
    "id",
    "liveStreamingDetails",
    "localizations",
    "player",
    "processingDetails",
    "recordingDetails",
    "snippet",
    "statistics",
    "status",
    "suggestions",
    "topicDetails",
})


class VideoService:
    def __init__(self, client: YouTubeClient):
        self.client = client

    def _first_video(self, video_id: str, part: str) -> dict:
        result = self.client.get("videos", {"id": video_id, "part": part})
        items = result.get("items", [])
        if not items:
            raise NotFoundError(f"Video not found: {video_id}")
        return items[0]

    def get_video(self, video_id: str, parts: Sequence[str] | None = None) -> dict:
        """Return the video resource restricted to ``id`` and the requested parts."""
        video_id = require(video_id, "videoId")
        parts = list(dict.fromkeys(parts)) if parts else list(DEFAULT_PARTS)
        unknown = [p for p in parts if p not in VIDEO_PARTS]
        if unknown:
            raise ValidationError(f"Unknown video parts: {', '.join(unknown)}")
        item = self._first_video(video_id, ",".join(parts))
        return {key: value for key, value in item.items() if key == "id" or key in parts}

    def get_video_stats(self, video_id: str) -> VideoStats:
        video_id = require(video_id, "videoId")
        item = self._first_video(video_id, "statistics")
        stats = item.get("statistics", {})
        return VideoStats(
            video_id=item.get("id", video_id),
            view_count=count(stats, "viewCount"),
            like_count=count(stats, "likeCount"),
            comment_count=count(stats, "commentCount"),
            favorite_count=count(stats, "favoriteCount"),
        )

    def search_videos(self, query: str, max_results: int | None = None) -> list[VideoSummary]:
        """Search for videos. maxResults defaults to 10 and is capped at one page."""
        query = require(query, "Query parameter \"q\"")
        limit = resolve_limit(max_results, DEFAULT_SEARCH_RESULTS, PAGE_SIZE)
        result = self.client.get("search", {
            "q": query,
            "part": "snippet",
            "type": "video",
            "maxResults": limit,
        })
        videos = []
        for item in result.get("items", [])[:limit]:
            snippet = item.get("snippet", {})
            video_id = item.get("id", {}).get("videoId", "")
            videos.append(VideoSummary(
                id=video_id,
                title=snippet.get("title", ""),
                channel_title=snippet.get("channelTitle", ""),
                published_at=snippet.get("publishedAt", ""),
                description=snippet.get("description", ""),
                thumbnail_url=best_thumbnail(snippet.get("thumbnails", {})),
                url=video_url(video_id),
            ))
        return videos
