from tubeproxy.models.common import ApiModel


class Playlist(ApiModel):
    id: str
    title: str
    description: str
    channel_id: str
    channel_title: str
    published_at: str | None = None
    item_count: int | None = None
    thumbnail_url: str | None = None
    url: str


class PlaylistItem(ApiModel):
    id: str
    video_id: str
    title: str
    description: str
    position: int
    channel_title: str = ""
    published_at: str | None = None
    thumbnail_url: str | None = None
    url: str
