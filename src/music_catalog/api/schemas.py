"""
music_catalog.api.schemas

Wire models shared by the API routers.

Responsibilities:
- Keep camelCase field names on the wire (`userId`, `authToken`, `artistId`).
- Convert domain records and pages into response bodies.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from music_catalog.catalog.models import Album, Artist, ArtistSummary, Page


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AlbumBody(WireModel):
    id: str = Field(min_length=1)
    name: str

    @classmethod
    def from_domain(cls, album: Album) -> AlbumBody:
        return cls(id=album.id, name=album.name)

    def to_domain(self) -> Album:
        return Album(id=self.id, name=self.name)


class ArtistBody(WireModel):
    id: str
    name: str

    @classmethod
    def from_domain(cls, artist: ArtistSummary) -> ArtistBody:
        return cls(id=artist.id, name=artist.name)


class ArtistRegistration(WireModel):
    id: str = Field(min_length=1)
    name: str
    albums: list[AlbumBody] = Field(default_factory=list)

    def to_domain(self) -> Artist:
        return Artist(
            id=self.id,
            name=self.name,
            albums=tuple(a.to_domain() for a in self.albums),
        )


class ArtistPage(WireModel):
    results: list[ArtistBody]
    total: int

    @classmethod
    def from_domain(cls, page: Page[ArtistSummary]) -> ArtistPage:
        return cls(results=[ArtistBody.from_domain(a) for a in page.results], total=page.total)


class AlbumPage(WireModel):
    results: list[AlbumBody]
    total: int

    @classmethod
    def from_domain(cls, page: Page[Album]) -> AlbumPage:
        return cls(results=[AlbumBody.from_domain(a) for a in page.results], total=page.total)
