"""
music_catalog.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings and the music service.
- Encapsulate app.state access patterns.
"""

from __future__ import annotations

from fastapi import Request

from music_catalog.services.music_service import InMemoryMusicService
from music_catalog.settings import Settings


def settings_dep(request: Request) -> Settings:
    # Settings are fixed at app construction in `music_catalog.api.app.create_app`.
    return request.app.state.settings  # type: ignore[attr-defined]


def music_service_dep(request: Request) -> InMemoryMusicService:
    return request.app.state.music_service  # type: ignore[attr-defined]
