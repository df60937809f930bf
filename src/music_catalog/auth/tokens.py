"""
music_catalog.auth.tokens

Opaque session token generators.

Responsibilities:
- Define the `TokenGenerator` capability used by the token authority.
- Provide a random uuid generator and a signed JWT generator.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Protocol

import jwt

from music_catalog.auth.models import Identity

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(tz=UTC)


class TokenGenerator(Protocol):
    def generate(self, identity: Identity) -> str: ...


class UuidTokenGenerator:
    def generate(self, identity: Identity) -> str:
        return str(uuid.uuid4())


@dataclass(frozen=True, slots=True)
class JwtConfig:
    alg: str
    issuer: str
    secret: str


class JwtTokenGenerator:
    def __init__(self, *, cfg: JwtConfig, clock: Clock = utcnow) -> None:
        self._cfg = cfg
        self._clock = clock

    def generate(self, identity: Identity) -> str:
        now = self._clock()
        # `jti` keeps tokens unique even when minted for the same user in the same second.
        payload: dict[str, Any] = {
            "iss": self._cfg.issuer,
            "sub": identity.user_id,
            "nickname": identity.nickname,
            "jti": uuid.uuid4().hex,
            "iat": int(now.timestamp()),
        }
        return jwt.encode(payload, self._cfg.secret, algorithm=self._cfg.alg)


# --- Module Notes -----------------------------------------------------------
# Tokens carry no `exp`: there is no per-token expiry, only a global reset.
