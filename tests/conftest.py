"""
tests.conftest

Shared pytest fixtures.
"""

from __future__ import annotations

import pytest
import pytest_asyncio

from music_catalog.services.music_service import InMemoryMusicService, MusicLibrary
from tests.builders import ALL_ARTISTS, USER


@pytest.fixture
def service() -> InMemoryMusicService:
    return InMemoryMusicService()


@pytest_asyncio.fixture
async def library(service: InMemoryMusicService) -> MusicLibrary:
    service.has_artists(*ALL_ARTISTS)
    service.has_user(USER)
    token = await service.generate_token(USER)
    return await service.login(token.auth_token)
