"""
In-memory movie catalog.

Loads movie records from a JSON document once and keeps them as an
immutable, ordered snapshot with an id index for constant-time lookups.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

logger = logging.getLogger(__name__)


def _field(data: Dict[str, Any], key: str, kind: Union[type, tuple]) -> Any:
    """Return data[key], raising ValueError unless it has the expected JSON type."""
    value = data[key]
    # bool is a subclass of int but never a valid number here
    if isinstance(value, bool) or not isinstance(value, kind):
        raise ValueError(f"{key!r} must be {getattr(kind, '__name__', 'a number')}, got {value!r}")
    return value


@dataclass(frozen=True)
class Movie:
    """A single catalog entry."""

    id: int
    movie_name: str
    director: str
    year: int
    genre: str
    description: str
    duration: int
    imdb_rating: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Movie":
        """
        Build a Movie from a JSON object using the wire field names.

        Raises:
            KeyError: If a required key is missing
            ValueError: If a value has the wrong type, the id is not positive
                or the name is blank
        """
        movie_id = _field(data, "id", int)
        if movie_id <= 0:
            raise ValueError(f"'id' must be positive, got {movie_id}")
        movie_name = _field(data, "movieName", str)
        if not movie_name.strip():
            raise ValueError(f"movie {movie_id} has a blank 'movieName'")

        return cls(
            id=movie_id,
            movie_name=movie_name,
            director=_field(data, "director", str),
            year=_field(data, "year", int),
            genre=_field(data, "genre", str),
            description=_field(data, "description", str),
            duration=_field(data, "duration", int),
            imdb_rating=float(_field(data, "imdbRating", (int, float))),
        )


def load_movies_from_json(path: Union[str, Path]) -> List[Movie]:
    """
    Load movies from a JSON array file.

    Any failure (missing file, malformed JSON, missing keys, wrong value
    types, non-positive ids, blank names) is logged and
    results in an empty list; the error is never propagated.

    Args:
        path: Path to the movies JSON file

    Returns:
        List of Movie objects in file order
    """
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
        if not isinstance(raw, list):
            raise ValueError(f"expected a JSON array, got {type(raw).__name__}")
        movies = [Movie.from_dict(item) for item in raw]
    except (OSError, ValueError, KeyError, TypeError) as e:
        logger.error("Failed to load movies from %s: %s", path, e)
        return []

    logger.info("Loaded %d movies from %s", len(movies), path)
    return movies


class Catalog:
    """
    Immutable snapshot of movies keyed by id.

    Ingestion order is preserved. When the source contains a repeated id the
    first record is kept and later ones are skipped.

    Usage:
        catalog = Catalog.from_json("movie_catalog/data/movies.json")
        movie = catalog.by_id(1)
        genres = catalog.genres()
    """

    def __init__(self, movies: Iterable[Movie] = ()):
        ordered: List[Movie] = []
        index: Dict[int, Movie] = {}
        for movie in movies:
            if movie.id in index:
                logger.warning("Duplicate movie id %d (%r) skipped", movie.id, movie.movie_name)
                continue
            index[movie.id] = movie
            ordered.append(movie)

        self._movies = tuple(ordered)
        self._by_id = MappingProxyType(index)
        self._genres = tuple(sorted({movie.genre for movie in ordered}))

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "Catalog":
        """Build a catalog from a movies JSON file (empty on load failure)."""
        return cls(load_movies_from_json(path))

    def all(self) -> List[Movie]:
        """Return every movie in ingestion order."""
        return list(self._movies)

    def by_id(self, movie_id: Optional[int]) -> Optional[Movie]:
        """
        Get a movie by id.

        Args:
            movie_id: Movie id

        Returns:
            Movie or None if the id is absent, non-positive or unknown
        """
        if movie_id is None or movie_id <= 0:
            return None
        return self._by_id.get(movie_id)

    def genres(self) -> List[str]:
        """Return distinct genre strings sorted by code point."""
        return list(self._genres)

    def __len__(self) -> int:
        return len(self._movies)

    def __iter__(self) -> Iterator[Movie]:
        return iter(self._movies)

    def __contains__(self, movie: object) -> bool:
        return isinstance(movie, Movie) and self._by_id.get(movie.id) is movie
