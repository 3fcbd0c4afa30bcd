"""
Pydantic schemas for System API.
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Catalog health report."""

    status: str
    movies: int
    genres: int
    reviews: int
