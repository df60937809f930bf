"""
music_catalog.store

In-memory stores populated by setup/registration.

Responsibilities:
- Credential store (username -> password).
- Catalog store (artist id -> artist, in registration order).
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Stores are process-local and cleared only by a global reset; nothing here persists.
