"""
Pydantic schemas for Movie API.
"""

from pydantic import BaseModel, Field


class MovieResponse(BaseModel):
    """Response model for a single movie, serialized with its catalog field names."""

    id: int
    movie_name: str = Field(serialization_alias="movieName")
    director: str
    year: int
    genre: str
    description: str
    duration: int
    imdb_rating: float = Field(serialization_alias="imdbRating")

    class Config:
        from_attributes = True


class SearchResponse(BaseModel):
    """Envelope returned by the JSON search endpoint."""

    success: bool
    message: str
    movies: list[MovieResponse] = []
