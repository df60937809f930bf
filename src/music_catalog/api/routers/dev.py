"""
music_catalog.api.routers.dev

Setup/test-support endpoints (disabled in prod).

Responsibilities:
- Register users and artists.
- Perform the global reset (users, catalog, tokens).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import Field
from starlette.status import HTTP_204_NO_CONTENT, HTTP_404_NOT_FOUND

from music_catalog.api.deps import music_service_dep, settings_dep
from music_catalog.api.schemas import ArtistRegistration, WireModel
from music_catalog.auth.models import Credentials
from music_catalog.services.music_service import InMemoryMusicService
from music_catalog.settings import Settings


def _dev_only(settings: Settings = Depends(settings_dep)) -> None:
    if settings.env == "prod":
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Not found")


router = APIRouter(prefix="/v1/dev", tags=["dev"], dependencies=[Depends(_dev_only)])


class UserRegistration(WireModel):
    username: str = Field(min_length=1, max_length=256)
    password: str


class ArtistsRegistration(WireModel):
    artists: list[ArtistRegistration] = Field(default_factory=list)


@router.post("/users", status_code=HTTP_204_NO_CONTENT)
async def register_user(
    body: UserRegistration,
    service: InMemoryMusicService = Depends(music_service_dep),
) -> None:
    service.has_user(Credentials(username=body.username, password=body.password))


@router.post("/artists", status_code=HTTP_204_NO_CONTENT)
async def register_artists(
    body: ArtistsRegistration,
    service: InMemoryMusicService = Depends(music_service_dep),
) -> None:
    service.has_artists(*(a.to_domain() for a in body.artists))


@router.post("/reset", status_code=HTTP_204_NO_CONTENT)
async def reset(service: InMemoryMusicService = Depends(music_service_dep)) -> None:
    service.clear()
