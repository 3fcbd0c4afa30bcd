"""
Movie reviews loaded from a bundled JSON document.
"""

import json
import logging
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Optional, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Review:
    """A single review of a movie."""

    movie_id: int
    reviewer_name: str
    rating: float
    comment: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Review":
        return cls(
            movie_id=int(data["movieId"]),
            reviewer_name=str(data["reviewerName"]),
            rating=float(data["rating"]),
            comment=str(data["comment"]),
        )


class ReviewService:
    """Read-only review lookup keyed by movie id."""

    def __init__(self, reviews: Iterable[Review] = ()):
        grouped: Dict[int, List[Review]] = defaultdict(list)
        for review in reviews:
            grouped[review.movie_id].append(review)
        self._by_movie = MappingProxyType({k: tuple(v) for k, v in grouped.items()})

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "ReviewService":
        """
        Load reviews from a JSON array file.

        Failures are logged and produce a service with no reviews.
        """
        try:
            with open(path, encoding="utf-8") as f:
                raw = json.load(f)
            if not isinstance(raw, list):
                raise ValueError(f"expected a JSON array, got {type(raw).__name__}")
            reviews = [Review.from_dict(item) for item in raw]
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.error("Failed to load reviews from %s: %s", path, e)
            return cls()

        logger.info("Loaded %d reviews from %s", len(reviews), path)
        return cls(reviews)

    def get_reviews_for_movie(self, movie_id: Optional[int]) -> List[Review]:
        """Return the reviews of a movie in file order (empty if none)."""
        if movie_id is None or movie_id <= 0:
            return []
        return list(self._by_movie.get(movie_id, ()))

    def count(self) -> int:
        return sum(len(v) for v in self._by_movie.values())
