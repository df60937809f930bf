"""
music_catalog.api.routers.library

Session-scoped catalog endpoints.

Responsibilities:
- Paginated artist listing, exact artist lookup, and (optionally filtered) album listing.
- Translate `ArtistNotFound` into 404.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette.status import HTTP_404_NOT_FOUND

from music_catalog.api.schemas import AlbumPage, ArtistBody, ArtistPage
from music_catalog.auth.deps import get_library
from music_catalog.catalog.models import AlbumQuery, Paging
from music_catalog.errors import ArtistNotFound
from music_catalog.services.music_service import MusicLibrary

router = APIRouter(prefix="/v1/library", tags=["library"])


@router.get("/artists", response_model=ArtistPage)
async def list_artists(
    index: int = Query(default=0, ge=0),
    count: int | None = Query(default=None, ge=0),
    library: MusicLibrary = Depends(get_library),
) -> ArtistPage:
    page = await library.artists(Paging(index=index, count=count))
    return ArtistPage.from_domain(page)


@router.get("/artists/{artist_id}", response_model=ArtistBody)
async def get_artist(
    artist_id: str,
    library: MusicLibrary = Depends(get_library),
) -> ArtistBody:
    try:
        return ArtistBody.from_domain(library.artist(artist_id))
    except ArtistNotFound as e:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail=e.to_detail()) from e


@router.get("/albums", response_model=AlbumPage)
async def list_albums(
    artist_id: str | None = Query(default=None, alias="artistId"),
    index: int = Query(default=0, ge=0),
    count: int | None = Query(default=None, ge=0),
    library: MusicLibrary = Depends(get_library),
) -> AlbumPage:
    page = await library.albums(AlbumQuery(artist_id=artist_id, index=index, count=count))
    return AlbumPage.from_domain(page)


# --- Module Notes -----------------------------------------------------------
# Unknown `artistId` filters and out-of-range paging return empty pages with status 200.
