from tubeproxy.client import YouTubeClient
from tubeproxy.exceptions import NotFoundError, UpstreamError
from tubeproxy.models.playlist import Playlist, PlaylistItem
from tubeproxy.services.common import (
    DEFAULT_LIST_RESULTS,
    MAX_LIST_RESULTS,
    best_thumbnail,
    playlist_url,
    require,
    resolve_limit,
    video_url,
)


class PlaylistService:
    def __init__(self, client: YouTubeClient):
        self.client = client

    def get_playlist(self, playlist_id: str) -> Playlist:
        playlist_id = require(playlist_id, "playlistId")
        result = self.client.get("playlists", {"id": playlist_id, "part": "snippet,contentDetails"})
        items = result.get("items", [])
        if not items:
            raise NotFoundError(f"Playlist not found: {playlist_id}")
        item = items[0]
        snippet = item.get("snippet", {})
        return Playlist(
            id=item["id"],
            title=snippet.get("title", ""),
            description=snippet.get("description", ""),
            channel_id=snippet.get("channelId", ""),
            channel_title=snippet.get("channelTitle", ""),
            published_at=snippet.get("publishedAt"),
            item_count=item.get("contentDetails", {}).get("itemCount"),
            thumbnail_url=best_thumbnail(snippet.get("thumbnails", {})),
            url=playlist_url(item["id"]),
        )

    def get_playlist_items(self, playlist_id: str, max_results: int | None = None) -> list[PlaylistItem]:
        """List videos in a playlist, paging through the upstream until maxResults is reached."""
        playlist_id = require(playlist_id, "playlistId")
        limit = resolve_limit(max_results, DEFAULT_LIST_RESULTS, MAX_LIST_RESULTS)
        try:
            entries = self.client.list_items("playlistItems", {"playlistId": playlist_id, "part": "snippet"}, limit)
        except UpstreamError as e:
            if e.upstream_status == 404:
                raise NotFoundError(f"Playlist not found: {playlist_id}") from e
            raise
        items = []
        for entry in entries:
            snippet = entry.get("snippet", {})
            video_id = snippet.get("resourceId", {}).get("videoId", "")
            items.append(PlaylistItem(
                id=entry.get("id", ""),
                video_id=video_id,
                title=snippet.get("title", ""),
                description=snippet.get("description", ""),
                position=snippet.get("position", 0),
                channel_title=snippet.get("videoOwnerChannelTitle", ""),
                published_at=snippet.get("publishedAt"),
                thumbnail_url=best_thumbnail(snippet.get("thumbnails", {})),
                url=video_url(video_id),
            ))
        return items
