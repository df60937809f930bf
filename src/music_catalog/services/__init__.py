"""
music_catalog.services

Service layer.

Responsibilities:
- The music service facade: setup, token issuance, login.
- The session-scoped music library handed out on login.
"""

# Package marker.
