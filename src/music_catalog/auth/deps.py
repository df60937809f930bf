"""
music_catalog.auth.deps

FastAPI dependency functions for session authentication.

Responsibilities:
- Convert a bearer token into a session-scoped `MusicLibrary`.
"""

from __future__ import annotations

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from starlette.status import HTTP_401_UNAUTHORIZED

from music_catalog.api.deps import music_service_dep
from music_catalog.errors import InvalidAuthToken
from music_catalog.services.music_service import InMemoryMusicService, MusicLibrary

_bearer = HTTPBearer(auto_error=False)


async def get_library(
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
    service: InMemoryMusicService = Depends(music_service_dep),
) -> MusicLibrary:
    if creds is None or not creds.credentials:
        raise HTTPException(
            status_code=HTTP_401_UNAUTHORIZED,
            detail=InvalidAuthToken("Missing bearer token").to_detail(),
        )

    try:
        return await service.login(creds.credentials)
    except InvalidAuthToken as e:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail=e.to_detail()) from e


# --- Module Notes -----------------------------------------------------------
# A library is opened per request, so each request reads the catalog as it is now.
