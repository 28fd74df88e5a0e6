from tubeproxy.exceptions import ValidationError

# Upper bound for paginated list endpoints
MAX_LIST_RESULTS = 500
DEFAULT_LIST_RESULTS = 50


def video_url(video_id: str) -> str:
    return f"https://www.youtube.com/watch?v={video_id}"


def channel_url(channel_id: str) -> str:
    return f"https://www.youtube.com/channel/{channel_id}"


def playlist_url(playlist_id: str) -> str:
    return f"https://www.youtube.com/playlist?list={playlist_id}"


def best_thumbnail(thumbnails: dict) -> str | None:
    for key in ("maxres", "high", "medium", "default"):
        if key in thumbnails:
            return thumbnails[key].get("url")
    return None


def count(stats: dict, key: str) -> int | None:
    """Statistics arrive as decimal strings and are omitted when hidden."""
    return int(stats[key]) if key in stats else None


def require(value: str | None, name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{name} is required.")
    return value.strip()


def resolve_limit(max_results: int | None, default: int, maximum: int) -> int:
    if max_results is None:
        return default
    if max_results < 1:
        raise ValidationError("maxResults must be a positive integer.")
    return min(max_results, maximum)
