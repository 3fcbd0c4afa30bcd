"""
Core catalog, search, review and icon logic (no web framework imports).
"""

from movie_catalog.core.catalog import Catalog, Movie, load_movies_from_json
from movie_catalog.core.search import matches_criteria, search_movies
from movie_catalog.core.reviews import Review, ReviewService
from movie_catalog.core.icons import get_movie_icon

__all__ = [
    'Catalog',
    'Movie',
    'load_movies_from_json',
    'matches_criteria',
    'search_movies',
    'Review',
    'ReviewService',
    'get_movie_icon',
]
