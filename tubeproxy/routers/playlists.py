from fastapi import APIRouter, Depends, Query

from tubeproxy.dependencies import get_playlist_service
from tubeproxy.models.common import DataResponse
from tubeproxy.models.playlist import Playlist, PlaylistItem
from tubeproxy.services.playlist import PlaylistService

router = APIRouter(prefix="/playlists", tags=["playlists"])


@router.get("/{playlist_id}")
def get_playlist(
    playlist_id: str,
    service: PlaylistService = Depends(get_playlist_service),
) -> DataResponse[Playlist]:
    return DataResponse(data=service.get_playlist(playlist_id))


@router.get("/{playlist_id}/items")
def list_playlist_items(
    playlist_id: str,
    max_results: int | None = Query(None, alias="maxResults"),
    service: PlaylistService = Depends(get_playlist_service),
) -> DataResponse[list[PlaylistItem]]:
    return DataResponse(data=service.get_playlist_items(playlist_id, max_results))
