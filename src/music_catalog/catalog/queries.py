"""
music_catalog.catalog.queries

Paginated catalog query engine.

Responsibilities:
- Slice ordered sequences into pages with clipped bounds.
- Answer artist listings, exact artist lookup, and (optionally filtered) album listings.
"""

from __future__ import annotations

from collections.abc import Sequence
from itertools import chain
from typing import TypeVar

from music_catalog.catalog.models import (
    Album,
    AlbumQuery,
    Artist,
    ArtistSummary,
    Page,
    Paging,
)
from music_catalog.errors import ArtistNotFound

T = TypeVar("T")


def paginate(items: Sequence[T], paging: Paging) -> Page[T]:
    total = len(items)
    # Python slicing already clips to bounds: an index past the end yields nothing.
    end = total if paging.count is None else paging.index + paging.count
    return Page(results=tuple(items[paging.index : end]), total=total)


class CatalogQueryEngine:
    """
    Read-only queries over artists in registration order.
    """

    def __init__(self, artists: Sequence[Artist]) -> None:
        self._artists = tuple(artists)
        self._by_id = {a.id: a for a in self._artists}

    def list_artists(self, paging: Paging | None = None) -> Page[ArtistSummary]:
        summaries = [a.summary() for a in self._artists]
        return paginate(summaries, paging or Paging())

    def get_artist(self, artist_id: str) -> ArtistSummary:
        artist = self._by_id.get(artist_id)
        if artist is None:
            raise ArtistNotFound(artist_id)
        return artist.summary()

    def list_albums(self, query: AlbumQuery | None = None) -> Page[Album]:
        query = query or AlbumQuery()
        # Filter first so `total` counts only the candidate albums.
        if query.artist_id is not None:
            artist = self._by_id.get(query.artist_id)
            candidates: Sequence[Album] = artist.albums if artist is not None else ()
        else:
            candidates = tuple(chain.from_iterable(a.albums for a in self._artists))
        return paginate(candidates, query.paging)


# --- Module Notes -----------------------------------------------------------
# An unknown `artist_id` filter is an empty page, not an error; only `get_artist` is strict.
