"""
Movie search over the in-memory catalog.

Filters by an optional name substring, an optional movie id and an optional
genre substring. Text matching is case-insensitive plain containment, so a
compound genre such as "Crime/Drama" matches both "crime" and "drama".
"""

import logging
from typing import List, Optional

from movie_catalog.core.catalog import Catalog, Movie

logger = logging.getLogger(__name__)


def _normalize(term: Optional[str]) -> Optional[str]:
    """Return the trimmed, lowercased term, or None when blank."""
    if term is None:
        return None
    term = term.strip()
    return term.lower() if term else None


def matches_criteria(movie: Movie, name: Optional[str] = None, genre: Optional[str] = None) -> bool:
    """
    Check whether a movie satisfies the name and genre filters.

    Args:
        movie: Movie to check
        name: Name substring (None or blank means no filter)
        genre: Genre substring (None or blank means no filter)

    Returns:
        True if the movie matches every provided filter
    """
    name_term = _normalize(name)
    if name_term is not None and name_term not in movie.movie_name.lower():
        return False

    genre_term = _normalize(genre)
    if genre_term is not None and genre_term not in movie.genre.lower():
        return False

    return True


def search_movies(
    catalog: Catalog,
    name: Optional[str] = None,
    movie_id: Optional[int] = None,
    genre: Optional[str] = None,
) -> List[Movie]:
    """
    Search the catalog.

    A positive movie_id restricts the search to that single movie, which must
    still pass the name and genre filters. Otherwise the whole catalog is
    scanned in order.

    Args:
        catalog: Catalog to search
        name: Case-insensitive partial match on the movie name
        movie_id: Exact movie id
        genre: Case-insensitive partial match on the genre

    Returns:
        Matching movies in catalog order
    """
    logger.info("Searching movies with name=%r, id=%r, genre=%r", name, movie_id, genre)

    if movie_id is not None and movie_id > 0:
        movie = catalog.by_id(movie_id)
        if movie is None:
            logger.info("No movie found with id %d", movie_id)
            return []
        if not matches_criteria(movie, name, genre):
            logger.info("Movie with id %d found but doesn't match other search criteria", movie_id)
            return []
        return [movie]

    results = [movie for movie in catalog if matches_criteria(movie, name, genre)]
    logger.info("Found %d movies matching search criteria", len(results))
    return results
