"""
music_catalog.services.music_service

In-memory music service and session-scoped music library.

Responsibilities:
- Register users and artists (setup) and perform the global reset.
- Issue tokens via the token authority.
- Exchange a valid token for a `MusicLibrary` bound to a catalog snapshot.
"""

from __future__ import annotations

from music_catalog.auth.authority import TokenAuthority
from music_catalog.auth.models import AuthSuccess, Credentials, Identity
from music_catalog.auth.tokens import (
    JwtConfig,
    JwtTokenGenerator,
    TokenGenerator,
    UuidTokenGenerator,
)
from music_catalog.catalog.models import (
    Album,
    AlbumQuery,
    Artist,
    ArtistSummary,
    Page,
    Paging,
)
from music_catalog.catalog.queries import CatalogQueryEngine
from music_catalog.observability.logging import get_logger
from music_catalog.settings import Settings
from music_catalog.store.catalog import CatalogStore
from music_catalog.store.credentials import CredentialStore

log = get_logger(__name__)


class MusicLibrary:
    """
    Read-only catalog view for one authenticated session.
    Built only by `InMemoryMusicService.login`.
    """

    def __init__(self, *, identity: Identity, engine: CatalogQueryEngine) -> None:
        self._identity = identity
        self._engine = engine

    @property
    def identity(self) -> Identity:
        return self._identity

    async def artists(self, paging: Paging | None = None) -> Page[ArtistSummary]:
        return self._engine.list_artists(paging)

    def artist(self, artist_id: str) -> ArtistSummary:
        return self._engine.get_artist(artist_id)

    async def albums(self, query: AlbumQuery | None = None) -> Page[Album]:
        return self._engine.list_albums(query)


def token_generator_for(settings: Settings) -> TokenGenerator:
    if settings.token_scheme == "jwt":
        return JwtTokenGenerator(
            cfg=JwtConfig(
                alg=settings.jwt_alg,
                issuer=settings.jwt_issuer,
                secret=settings.jwt_secret,
            )
        )
    return UuidTokenGenerator()


class InMemoryMusicService:
    def __init__(self, *, generator: TokenGenerator | None = None) -> None:
        self._users = CredentialStore()
        self._catalog = CatalogStore()
        self._authority = TokenAuthority(credentials=self._users, generator=generator)

    @classmethod
    def from_settings(cls, settings: Settings) -> InMemoryMusicService:
        return cls(generator=token_generator_for(settings))

    # --- setup -------------------------------------------------------------

    def has_user(self, credentials: Credentials) -> None:
        self._users.add(credentials)
        log.info("user_registered", username=credentials.username)

    def has_artists(self, *artists: Artist) -> None:
        added = self._catalog.add(artists)
        log.info("artists_registered", count=len(added), catalog_size=len(self._catalog))

    def clear(self) -> None:
        # Global reset: users, catalog, and every issued token go together.
        self._users.clear()
        self._catalog.clear()
        self._authority.reset()
        log.info("catalog_reset")

    @property
    def artist_count(self) -> int:
        return len(self._catalog)

    # --- contract ----------------------------------------------------------

    async def generate_token(self, credentials: Credentials) -> AuthSuccess:
        return await self._authority.issue_token(credentials)

    async def login(self, auth_token: str) -> MusicLibrary:
        identity = self._authority.resolve_token(auth_token)
        engine = CatalogQueryEngine(self._catalog.snapshot())
        log.info("library_opened", user_id=identity.user_id)
        return MusicLibrary(identity=identity, engine=engine)


# --- Module Notes -----------------------------------------------------------
# Each library reads the snapshot taken at login; later registrations or a reset
# do not change what an already-open library returns.
