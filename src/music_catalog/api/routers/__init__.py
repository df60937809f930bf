"""
music_catalog.api.routers

Router modules: health, auth, library, dev.
"""

# Package marker.
