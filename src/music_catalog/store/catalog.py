"""
music_catalog.store.catalog

Catalog store.

Responsibilities:
- Register artists (with their albums) preserving registration order.
- Hand out immutable snapshots for session-scoped query engines.
"""

from __future__ import annotations

from collections.abc import Iterable

from music_catalog.catalog.models import Artist


class CatalogStore:
    def __init__(self) -> None:
        # dicts keep insertion order; replacing an id keeps its original position.
        self._artists: dict[str, Artist] = {}

    def add(self, artists: Iterable[Artist]) -> list[Artist]:
        added = list(artists)
        for artist in added:
            self._artists[artist.id] = artist
        return added

    def snapshot(self) -> tuple[Artist, ...]:
        return tuple(self._artists.values())

    def __len__(self) -> int:
        return len(self._artists)

    def clear(self) -> None:
        self._artists.clear()


# --- Module Notes -----------------------------------------------------------
# Artist records are frozen, so a snapshot tuple is a complete, isolated view.
