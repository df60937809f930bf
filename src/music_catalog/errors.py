"""
music_catalog.errors

Failure kinds raised by the music service.

Responsibilities:
- Name the three terminal failures callers can observe:
  `InvalidCredentials`, `InvalidAuthToken`, `ArtistNotFound`.
"""

from __future__ import annotations


class MusicServiceError(Exception):
    kind: str = "MusicServiceError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_detail(self) -> dict[str, str]:
        return {"error": self.kind, "message": self.message}


class InvalidCredentials(MusicServiceError):
    kind = "InvalidCredentials"

    def __init__(self, message: str = "Invalid user:password combination") -> None:
        super().__init__(message)


class InvalidAuthToken(MusicServiceError):
    kind = "InvalidAuthToken"

    def __init__(self, message: str = "Invalid auth token") -> None:
        super().__init__(message)


class ArtistNotFound(MusicServiceError):
    kind = "ArtistNotFound"

    def __init__(self, artist_id: str) -> None:
        super().__init__(f"No artist with id '{artist_id}'")
        self.artist_id = artist_id


# --- Module Notes -----------------------------------------------------------
# Listing operations never raise these for out-of-range paging or unknown filter ids;
# only exact lookups and the auth boundary do.
