from tubeproxy.models.common import ApiModel


class TranscriptSegment(ApiModel):
    text: str
    start: float
    duration: float


class Transcript(ApiModel):
    video_id: str
    language: str
    language_code: str
    is_generated: bool
    segments: list[TranscriptSegment]
    text: str
