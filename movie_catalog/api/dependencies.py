"""
FastAPI dependency injection for the catalog, reviews and templates.
"""

import logging

from fastapi.templating import Jinja2Templates

from movie_catalog.api.config import get_movies_path, get_reviews_path, get_templates_dir
from movie_catalog.core.catalog import Catalog
from movie_catalog.core.reviews import ReviewService

logger = logging.getLogger(__name__)

# Process-wide singletons, built once and read-only afterwards
_catalog: Catalog | None = None
_review_service: ReviewService | None = None
_templates: Jinja2Templates | None = None


def get_catalog() -> Catalog:
    """Get or create singleton Catalog."""
    global _catalog
    if _catalog is None:
        _catalog = Catalog.from_json(get_movies_path())
        if not len(_catalog):
            logger.warning("Movie catalog is empty; all searches will return no results")
    return _catalog


def get_review_service() -> ReviewService:
    """Get or create singleton ReviewService."""
    global _review_service
    if _review_service is None:
        _review_service = ReviewService.from_json(get_reviews_path())
    return _review_service


def get_templates() -> Jinja2Templates:
    """Get or create singleton Jinja2 template renderer."""
    global _templates
    if _templates is None:
        _templates = Jinja2Templates(directory=get_templates_dir())
    return _templates
