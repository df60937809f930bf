"""
music_catalog.api.routers.auth

Token issuance endpoint.

Responsibilities:
- Exchange username/password for `{userId, nickname, authToken}`.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from starlette.status import HTTP_401_UNAUTHORIZED

from music_catalog.api.deps import music_service_dep
from music_catalog.api.schemas import WireModel
from music_catalog.auth.models import Credentials
from music_catalog.errors import InvalidCredentials
from music_catalog.services.music_service import InMemoryMusicService

router = APIRouter(prefix="/v1/auth", tags=["auth"])


class TokenRequest(WireModel):
    username: str
    password: str


class TokenResponse(WireModel):
    user_id: str
    nickname: str
    auth_token: str


@router.post("/token", response_model=TokenResponse)
async def issue_token(
    body: TokenRequest,
    service: InMemoryMusicService = Depends(music_service_dep),
) -> TokenResponse:
    try:
        result = await service.generate_token(
            Credentials(username=body.username, password=body.password)
        )
    except InvalidCredentials as e:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail=e.to_detail()) from e
    return TokenResponse(
        user_id=result.user_id,
        nickname=result.nickname,
        auth_token=result.auth_token,
    )
