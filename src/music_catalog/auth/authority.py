"""
music_catalog.auth.authority

Token authority.

Responsibilities:
- Check credentials against the credential store and mint session tokens.
- Resolve tokens back to the identity they were issued for.
- Forget every issued token on reset.
"""

from __future__ import annotations

from music_catalog.auth.models import AuthSuccess, Credentials, Identity
from music_catalog.auth.tokens import TokenGenerator, UuidTokenGenerator
from music_catalog.errors import InvalidAuthToken, InvalidCredentials
from music_catalog.observability.logging import get_logger
from music_catalog.store.credentials import CredentialStore

log = get_logger(__name__)


class TokenAuthority:
    def __init__(
        self,
        *,
        credentials: CredentialStore,
        generator: TokenGenerator | None = None,
    ) -> None:
        self._credentials = credentials
        self._generator = generator or UuidTokenGenerator()
        self._tokens: dict[str, Identity] = {}

    async def issue_token(self, credentials: Credentials) -> AuthSuccess:
        if not self._credentials.matches(credentials):
            log.info("credentials_rejected", username=credentials.username)
            raise InvalidCredentials()

        identity = Identity.for_user(credentials.username)
        token = self._generator.generate(identity)
        while token in self._tokens:
            token = self._generator.generate(identity)
        self._tokens[token] = identity

        log.info("token_issued", user_id=identity.user_id)
        return AuthSuccess(
            user_id=identity.user_id,
            nickname=identity.nickname,
            auth_token=token,
        )

    def resolve_token(self, token: str) -> Identity:
        identity = self._tokens.get(token)
        if identity is None:
            log.info("token_rejected")
            raise InvalidAuthToken()
        return identity

    def reset(self) -> None:
        self._tokens.clear()

    def __len__(self) -> int:
        return len(self._tokens)


# --- Module Notes -----------------------------------------------------------
# Invalidation is all-or-nothing: there is no per-token revoke or expiry.
