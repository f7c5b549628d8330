"""
Application package for the gallery image upload service.

Modules are organized to separate the HTTP API, service orchestration,
image storage, and persistence concerns so that individual layers can evolve
independently.
"""

from .config import settings  # noqa: F401  (re-export for convenience)
