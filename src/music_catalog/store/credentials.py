"""
music_catalog.store.credentials

Credential store.

Responsibilities:
- Hold registered users keyed by username.
- Answer exact password matches for the token authority.
"""

from __future__ import annotations

from music_catalog.auth.models import Credentials


class CredentialStore:
    def __init__(self) -> None:
        self._passwords: dict[str, str] = {}

    def add(self, credentials: Credentials) -> None:
        # Re-registering a username replaces its password.
        self._passwords[credentials.username] = credentials.password

    def matches(self, credentials: Credentials) -> bool:
        stored = self._passwords.get(credentials.username)
        return stored is not None and stored == credentials.password

    def clear(self) -> None:
        self._passwords.clear()


# --- Module Notes -----------------------------------------------------------
# Passwords are stored and compared as plain strings; hashing is out of scope here.
