from tubeproxy.models.common import ApiModel


class Channel(ApiModel):
    id: str
    title: str
    description: str
    custom_url: str | None = None
    published_at: str | None = None
    country: str | None = None
    subscriber_count: int | None = None
    video_count: int | None = None
    view_count: int | None = None
    uploads_playlist_id: str | None = None
    thumbnail_url: str | None = None
    url: str
