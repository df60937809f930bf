"""
music_catalog.catalog

Catalog domain package.

Responsibilities:
- Artist/album records and listing result types.
- The paginated query engine over an immutable catalog snapshot.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing in this package mutates catalog state; registration lives in `music_catalog.store`.
