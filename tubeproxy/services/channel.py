from tubeproxy.client import YouTubeClient
from tubeproxy.exceptions import NotFoundError, UpstreamError
from tubeproxy.models.channel import Channel
from tubeproxy.models.video import VideoSummary
from tubeproxy.services.common import (
    DEFAULT_LIST_RESULTS,
    MAX_LIST_RESULTS,
    best_thumbnail,
    channel_url,
    count,
    require,
    resolve_limit,
    video_url,
)


class ChannelService:
    def __init__(self, client: YouTubeClient):
        self.client = client

    def _first_channel(self, channel_id: str, part: str) -> dict:
        result = self.client.get("channels", {"id": channel_id, "part": part})
        items = result.get("items", [])
        if not items:
            raise NotFoundError(f"Channel not found: {channel_id}")
        return items[0]

    def get_channel(self, channel_id: str) -> Channel:
        channel_id = require(channel_id, "channelId")
        item = self._first_channel(channel_id, "snippet,statistics,contentDetails")
        snippet = item.get("snippet", {})
        stats = item.get("statistics", {})
        related = item.get("contentDetails", {}).get("relatedPlaylists", {})
        return Channel(
            id=item["id"],
            title=snippet.get("title", ""),
            description=snippet.get("description", ""),
            custom_url=snippet.get("customUrl"),
            published_at=snippet.get("publishedAt"),
            country=snippet.get("country"),
            subscriber_count=count(stats, "subscriberCount"),
            video_count=count(stats, "videoCount"),
            view_count=count(stats, "viewCount"),
            uploads_playlist_id=related.get("uploads"),
            thumbnail_url=best_thumbnail(snippet.get("thumbnails", {})),
            url=channel_url(item["id"]),
        )

    def list_videos(self, channel_id: str, max_results: int | None = None) -> list[VideoSummary]:
        """List a channel's uploads, newest first, via its uploads playlist."""
        channel_id = require(channel_id, "channelId")
        limit = resolve_limit(max_results, DEFAULT_LIST_RESULTS, MAX_LIST_RESULTS)
        item = self._first_channel(channel_id, "contentDetails")
        uploads = item.get("contentDetails", {}).get("relatedPlaylists", {}).get("uploads")
        if not uploads:
            raise NotFoundError(f"Channel {channel_id} has no uploads playlist")

        try:
            items = self.client.list_items(
                "playlistItems",
                {"playlistId": uploads, "part": "snippet,contentDetails"},
                limit,
            )
        except UpstreamError as e:
            if e.upstream_status == 404:
                raise NotFoundError(f"Channel {channel_id} has no uploads playlist") from e
            raise
        videos = []
        for entry in items:
            snippet = entry.get("snippet", {})
            details = entry.get("contentDetails", {})
            video_id = details.get("videoId") or snippet.get("resourceId", {}).get("videoId", "")
            videos.append(VideoSummary(
                id=video_id,
                title=snippet.get("title", ""),
                channel_title=snippet.get("channelTitle", ""),
                published_at=details.get("videoPublishedAt") or snippet.get("publishedAt", ""),
                description=snippet.get("description", ""),
                thumbnail_url=best_thumbnail(snippet.get("thumbnails", {})),
                url=video_url(video_id),
            ))
        return videos
