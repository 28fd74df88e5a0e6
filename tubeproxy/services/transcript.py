import logging

import requests
from youtube_transcript_api import (
    CouldNotRetrieveTranscript,
    NoTranscriptFound,
    TranscriptsDisabled,
    VideoUnavailable,
    YouTubeTranscriptApi,
)

from tubeproxy.exceptions import NotFoundError, UpstreamError
from tubeproxy.models.transcript import Transcript, TranscriptSegment
from tubeproxy.services.common import require

logger = logging.getLogger(__name__)


def _language_candidates(language: str) -> list[str]:
    """'en-US' also matches a plain 'en' track."""
    candidates = [language]
    primary = language.split("-", 1)[0]
    if primary != language:
        candidates.append(primary)
    return candidates


class TranscriptService:
    def __init__(self, transcript_api: YouTubeTranscriptApi):
        self.transcript_api = transcript_api

    def get_transcript(self, video_id: str, language: str | None = None) -> Transcript:
        """Fetch captions for a video.

        With ``language`` the matching track is required. Without it the first
        available track is used, manually created tracks ahead of generated ones.
        """
        video_id = require(video_id, "videoId")
        try:
            transcript_list = self.transcript_api.list(video_id)
            if language:
                try:
                    track = transcript_list.find_transcript(_language_candidates(language))
                except NoTranscriptFound as e:
                    raise NotFoundError(f"No transcript in language '{language}' for video {video_id}") from e
            else:
                track = next(iter(transcript_list), None)
                if track is None:
                    raise NotFoundError(f"No transcript available for video {video_id}")
            fetched = track.fetch()
        except (TranscriptsDisabled, NoTranscriptFound, VideoUnavailable) as e:
            raise NotFoundError(f"No transcript available for video {video_id}") from e
        except CouldNotRetrieveTranscript as e:
            logger.warning("Transcript fetch failed for %s: %s", video_id, type(e).__name__)
            raise UpstreamError(f"Could not retrieve transcript for video {video_id}") from e
        except requests.RequestException as e:
            raise UpstreamError(f"Transcript request failed: {e}") from e

        segments = [
            TranscriptSegment(text=s.text, start=s.start, duration=s.duration)
            for s in fetched.snippets
        ]
        return Transcript(
            video_id=video_id,
            language=track.language,
            language_code=track.language_code,
            is_generated=track.is_generated,
            segments=segments,
            text=" ".join(s.text for s in segments),
        )
