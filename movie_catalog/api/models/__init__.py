"""
Pydantic schemas for API responses.
"""

from movie_catalog.api.models.movie import MovieResponse, SearchResponse
from movie_catalog.api.models.health import HealthResponse

__all__ = [
    "MovieResponse",
    "SearchResponse",
    "HealthResponse",
]
