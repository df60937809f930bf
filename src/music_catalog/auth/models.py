"""
music_catalog.auth.models

Auth domain models.

Responsibilities:
- Define the credentials a user registers and logs in with.
- Define the identity a token is bound to, and the issuance result.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Credentials:
    username: str
    # Kept out of reprs so credentials never reach structured logs.
    password: str = field(repr=False)


@dataclass(frozen=True, slots=True)
class Identity:
    """
    Authenticated caller identity.
    The username doubles as user id and nickname in this reference model.
    """

    user_id: str
    nickname: str

    @classmethod
    def for_user(cls, username: str) -> Identity:
        return cls(user_id=username, nickname=username)


@dataclass(frozen=True, slots=True)
class AuthSuccess:
    user_id: str
    nickname: str
    auth_token: str


# --- Module Notes -----------------------------------------------------------
# Keep these models minimal; they cross the service, API, and test boundaries.
