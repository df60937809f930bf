"""
music_catalog.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) reporting the catalog size.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from music_catalog.api.deps import music_service_dep
from music_catalog.services.music_service import InMemoryMusicService

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(
    service: InMemoryMusicService = Depends(music_service_dep),
) -> dict[str, str | int]:
    return {"status": "ready", "artists": service.artist_count}
