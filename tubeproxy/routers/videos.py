from typing import Any

from fastapi import APIRouter, Depends, Query

from tubeproxy.dependencies import get_transcript_service, get_video_service
from tubeproxy.exceptions import ValidationError
from tubeproxy.models.common import DataResponse
from tubeproxy.models.transcript import Transcript
from tubeproxy.models.video import VideoStats, VideoSummary
from tubeproxy.services.transcript import TranscriptService
from tubeproxy.services.video import VideoService

router = APIRouter(prefix="/videos", tags=["videos"])


def _split_parts(raw: list[str] | None) -> list[str] | None:
    """Accept both ?parts=a,b and ?parts=a&parts=b."""
    if not raw:
        return None
    parts = [p.strip() for value in raw for p in value.split(",") if p.strip()]
    return parts or None


@router.get("")
def search_videos(
    q: str | None = None,
    max_results: int | None = Query(None, alias="maxResults"),
    service: VideoService = Depends(get_video_service),
) -> DataResponse[list[VideoSummary]]:
    if not q:
        raise ValidationError('Query parameter "q" is required.')
    return DataResponse(data=service.search_videos(q, max_results))


@router.get("/{video_id}")
def get_video(
    video_id: str,
    parts: list[str] | None = Query(None),
    service: VideoService = Depends(get_video_service),
) -> DataResponse[dict[str, Any]]:
    return DataResponse(data=service.get_video(video_id, _split_parts(parts)))


@router.get("/{video_id}/stats")
def get_video_stats(
    video_id: str,
    service: VideoService = Depends(get_video_service),
) -> DataResponse[VideoStats]:
    return DataResponse(data=service.get_video_stats(video_id))


@router.get("/{video_id}/transcript")
def get_transcript(
    video_id: str,
    language: str | None = None,
    service: TranscriptService = Depends(get_transcript_service),
) -> DataResponse[Transcript]:
    return DataResponse(data=service.get_transcript(video_id, language))
