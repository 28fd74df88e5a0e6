from tubeproxy.models.common import ApiModel


class VideoSummary(ApiModel):
    id: str
    title: str
    channel_title: str
    published_at: str
    description: str = ""
    thumbnail_url: str | None = None
    url: str


class VideoStats(ApiModel):
    video_id: str
    view_count: int | None = None
    like_count: int | None = None
    comment_count: int | None = None
    favorite_count: int | None = None
