from fastapi import APIRouter, Depends, Query

from tubeproxy.dependencies import get_channel_service
from tubeproxy.models.channel import Channel
from tubeproxy.models.common import DataResponse
from tubeproxy.models.video import VideoSummary
from tubeproxy.services.channel import ChannelService

router = APIRouter(prefix="/channels", tags=["channels"])


@router.get("/{channel_id}")
def get_channel(
    channel_id: str,
    service: ChannelService = Depends(get_channel_service),
) -> DataResponse[Channel]:
    return DataResponse(data=service.get_channel(channel_id))


@router.get("/{channel_id}/videos")
def list_channel_videos(
    channel_id: str,
    max_results: int | None = Query(None, alias="maxResults"),
    service: ChannelService = Depends(get_channel_service),
) -> DataResponse[list[VideoSummary]]:
    return DataResponse(data=service.list_videos(channel_id, max_results))
