"""
music_catalog.auth

Authentication package.

Responsibilities:
- Credential/identity models.
- Opaque token generation (uuid or signed JWT).
- The token authority that issues and resolves session tokens.
- FastAPI bearer-token dependency.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Token validity is decided by the authority's token map, never by token contents.
