"""
tests.test_tokens

Token generators and the token authority.
"""

from __future__ import annotations

from datetime import UTC, datetime

import jwt
import pytest

from music_catalog.auth.authority import TokenAuthority
from music_catalog.auth.models import Credentials, Identity
from music_catalog.auth.tokens import (
    JwtConfig,
    JwtTokenGenerator,
    UuidTokenGenerator,
)
from music_catalog.errors import InvalidAuthToken, InvalidCredentials
from music_catalog.store.credentials import CredentialStore

BOB = Credentials(username="bob", password="smith")
CFG = JwtConfig(
    alg="HS256",
    issuer="music-catalog-test",
    secret="test-secret-0123456789abcdef0123456789",
)


def test_uuid_tokens_are_unique() -> None:
    gen = UuidTokenGenerator()
    identity = Identity.for_user("bob")
    tokens = {gen.generate(identity) for _ in range(100)}
    assert len(tokens) == 100


def test_jwt_token_carries_identity_and_clock_time() -> None:
    issued_at = datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)
    gen = JwtTokenGenerator(cfg=CFG, clock=lambda: issued_at)

    token = gen.generate(Identity.for_user("bob"))
    claims = jwt.decode(token, CFG.secret, algorithms=[CFG.alg], issuer=CFG.issuer)

    assert claims["sub"] == "bob"
    assert claims["nickname"] == "bob"
    assert claims["iss"] == "music-catalog-test"
    assert claims["iat"] == int(issued_at.timestamp())


def test_jwt_tokens_for_same_user_and_instant_differ() -> None:
    fixed = datetime(2024, 1, 1, tzinfo=UTC)
    gen = JwtTokenGenerator(cfg=CFG, clock=lambda: fixed)
    identity = Identity.for_user("bob")
    assert gen.generate(identity) != gen.generate(identity)


def _authority(generator=None) -> TokenAuthority:
    store = CredentialStore()
    store.add(BOB)
    return TokenAuthority(credentials=store, generator=generator)


@pytest.mark.asyncio
async def test_issue_and_resolve_round_trip() -> None:
    authority = _authority()

    result = await authority.issue_token(BOB)

    assert result.user_id == "bob"
    assert result.nickname == "bob"
    assert authority.resolve_token(result.auth_token) == Identity(user_id="bob", nickname="bob")


@pytest.mark.asyncio
async def test_each_issue_mints_a_fresh_token() -> None:
    authority = _authority()
    first = await authority.issue_token(BOB)
    second = await authority.issue_token(BOB)
    assert first.auth_token != second.auth_token
    assert len(authority) == 2


@pytest.mark.asyncio
async def test_colliding_generator_output_is_regenerated() -> None:
    class Repeating:
        def __init__(self) -> None:
            self._values = iter(["dup", "dup", "fresh"])

        def generate(self, identity: Identity) -> str:
            return next(self._values)

    authority = _authority(Repeating())
    first = await authority.issue_token(BOB)
    second = await authority.issue_token(BOB)
    assert (first.auth_token, second.auth_token) == ("dup", "fresh")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "credentials",
    [
        Credentials(username="bob", password="wrong"),
        Credentials(username="bob", password=""),
        Credentials(username="alice", password="smith"),
    ],
)
async def test_bad_credentials_are_rejected_without_a_token(credentials: Credentials) -> None:
    authority = _authority()
    with pytest.raises(InvalidCredentials) as exc:
        await authority.issue_token(credentials)
    assert exc.value.kind == "InvalidCredentials"
    assert len(authority) == 0


def test_unknown_token_is_rejected() -> None:
    with pytest.raises(InvalidAuthToken, match="Invalid auth token"):
        _authority().resolve_token("nope")


@pytest.mark.asyncio
async def test_reset_invalidates_every_token() -> None:
    authority = _authority()
    tokens = [(await authority.issue_token(BOB)).auth_token for _ in range(3)]

    authority.reset()

    for token in tokens:
        with pytest.raises(InvalidAuthToken):
            authority.resolve_token(token)
