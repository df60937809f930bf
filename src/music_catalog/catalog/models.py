"""
music_catalog.catalog.models

Catalog records and listing types.

Responsibilities:
- Define `Artist`/`Album` records (registration order is carried by tuples).
- Define pagination parameters and the `Page` listing result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Album:
    id: str
    name: str


@dataclass(frozen=True, slots=True)
class ArtistSummary:
    """
    Listing/lookup projection of an artist; albums are deliberately excluded.
    """

    id: str
    name: str


@dataclass(frozen=True, slots=True)
class Artist:
    id: str
    name: str
    albums: tuple[Album, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable of albums but always store an ordered tuple.
        if not isinstance(self.albums, tuple):
            object.__setattr__(self, "albums", tuple(self.albums))

    def summary(self) -> ArtistSummary:
        return ArtistSummary(id=self.id, name=self.name)


@dataclass(frozen=True, slots=True)
class Paging:
    """
    Pagination parameters: the slice `[index, index + count)`.
    `count=None` takes everything remaining from `index`.
    """

    index: int = 0
    count: int | None = None

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"index must be non-negative, got {self.index}")
        if self.count is not None and self.count < 0:
            raise ValueError(f"count must be non-negative, got {self.count}")


@dataclass(frozen=True, slots=True)
class AlbumQuery:
    artist_id: str | None = None
    index: int = 0
    count: int | None = None

    @property
    def paging(self) -> Paging:
        return Paging(index=self.index, count=self.count)


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    results: tuple[T, ...]
    total: int


# --- Module Notes -----------------------------------------------------------
# `total` on a Page is always the filtered count before slicing.
