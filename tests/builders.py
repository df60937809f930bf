"""
tests.builders

Catalog fixtures shared across test modules.

Registration order is BOB_MARLEY, MADONNA, BLONDIE, METALLICA with album
counts [3, 0, 2, 1].
"""

from __future__ import annotations

import uuid

from music_catalog.auth.models import Credentials
from music_catalog.catalog.models import Album, Artist


def an_album(name: str) -> Album:
    return Album(id=str(uuid.uuid4()), name=name)


def an_artist(name: str, *albums: Album) -> Artist:
    return Artist(id=str(uuid.uuid4()), name=name, albums=albums)


BOB_MARLEY = an_artist(
    "Bob Marley",
    an_album("Catch a Fire"),
    an_album("Burnin'"),
    an_album("Natty Dread"),
)
MADONNA = an_artist("Madonna")
BLONDIE = an_artist("Blondie", an_album("Parallel Lines"), an_album("Eat to the Beat"))
METALLICA = an_artist("Metallica", an_album("Master of Puppets"))

ALL_ARTISTS = (BOB_MARLEY, MADONNA, BLONDIE, METALLICA)
ALL_ALBUMS = (
    *BOB_MARLEY.albums,
    *MADONNA.albums,
    *BLONDIE.albums,
    *METALLICA.albums,
)

USER = Credentials(username="user100", password="password100")
