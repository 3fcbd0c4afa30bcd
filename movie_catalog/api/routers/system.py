"""
System API endpoints (health).
"""

from fastapi import APIRouter, Depends

from movie_catalog.api.dependencies import get_catalog, get_review_service
from movie_catalog.api.models.health import HealthResponse
from movie_catalog.core.catalog import Catalog
from movie_catalog.core.reviews import ReviewService

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health", response_model=HealthResponse)
def health_check(
    catalog: Catalog = Depends(get_catalog),
    review_service: ReviewService = Depends(get_review_service),
):
    """Health check: catalog loaded and review counts."""
    return HealthResponse(
        status="healthy" if len(catalog) else "degraded",
        movies=len(catalog),
        genres=len(catalog.genres()),
        reviews=review_service.count(),
    )
