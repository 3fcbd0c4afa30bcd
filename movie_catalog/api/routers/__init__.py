"""
API route handlers.
"""

from movie_catalog.api.routers import movies, system

__all__ = ["movies", "system"]
