from fastapi import Depends
from youtube_transcript_api import YouTubeTranscriptApi
from youtube_transcript_api.proxies import GenericProxyConfig

from tubeproxy.client import YouTubeClient
from tubeproxy.config import get_settings
from tubeproxy.http_client import get_session
from tubeproxy.services.channel import ChannelService
from tubeproxy.services.playlist import PlaylistService
from tubeproxy.services.transcript import TranscriptService
from tubeproxy.services.video import VideoService


def get_client() -> YouTubeClient:
    """Build a client per request; the underlying httplib2.Http is not thread-safe."""
    return YouTubeClient(get_settings().youtube_api_key)


def get_transcript_api() -> YouTubeTranscriptApi:
    proxy_url = get_settings().transcript_proxy_url
    proxy_config = GenericProxyConfig(http_url=proxy_url, https_url=proxy_url) if proxy_url else None
    return YouTubeTranscriptApi(proxy_config=proxy_config, http_client=get_session())


def get_video_service(client: YouTubeClient = Depends(get_client)) -> VideoService:
    return VideoService(client)


def get_channel_service(client: YouTubeClient = Depends(get_client)) -> ChannelService:
    return ChannelService(client)


def get_playlist_service(client: YouTubeClient = Depends(get_client)) -> PlaylistService:
    return PlaylistService(client)


def get_transcript_service(
    transcript_api: YouTubeTranscriptApi = Depends(get_transcript_api),
) -> TranscriptService:
    return TranscriptService(transcript_api)
