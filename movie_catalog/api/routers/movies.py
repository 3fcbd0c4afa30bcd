"""
Movie endpoints: catalog page, search (JSON and HTML form) and details page.
"""

import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates

from movie_catalog.api.dependencies import get_catalog, get_review_service, get_templates
from movie_catalog.api.models.movie import MovieResponse, SearchResponse
from movie_catalog.core.catalog import Catalog
from movie_catalog.core.icons import get_movie_icon
from movie_catalog.core.reviews import ReviewService
from movie_catalog.core.search import search_movies

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/movies", tags=["movies"])

INVALID_ID_MESSAGE = "The movie ID is invalid. It must be a positive number."
SEARCH_ERROR_MESSAGE = "Something went wrong during the search. Please try again later."
NO_RESULTS_MESSAGE = "No movies found matching your search criteria."


def search_message(count: int) -> str:
    """Human-readable summary of a search result count."""
    if count == 0:
        return NO_RESULTS_MESSAGE
    return f"Found {count} movie{'' if count == 1 else 's'} matching your search."


def parse_movie_id(raw: str | None) -> int | None:
    """
    Parse the id query value.

    Blank or whitespace-only values mean no id filter. Anything that is not a
    positive integer raises ValueError.
    """
    if raw is None or not raw.strip():
        return None
    movie_id = int(raw.strip())
    if movie_id <= 0:
        raise ValueError(f"movie id must be positive, got {movie_id}")
    return movie_id


def _envelope(status_code: int, success: bool, message: str, movies=()) -> JSONResponse:
    body = SearchResponse(
        success=success,
        message=message,
        movies=[MovieResponse.model_validate(m) for m in movies],
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


@router.get("", include_in_schema=False)
def list_movies(
    request: Request,
    catalog: Catalog = Depends(get_catalog),
    templates: Jinja2Templates = Depends(get_templates),
):
    """Catalog landing page with every movie and the genre list."""
    logger.info("Fetching movies")
    return templates.TemplateResponse(
        request,
        "movies.html",
        {"movies": catalog.all(), "genres": catalog.genres()},
    )


@router.get("/search", response_model=SearchResponse)
def search_movies_api(
    name: str | None = Query(None),
    raw_id: str | None = Query(None, alias="id"),
    genre: str | None = Query(None),
    catalog: Catalog = Depends(get_catalog),
):
    """Search movies by name, id and genre; any combination is allowed."""
    logger.info("API search request - name: %r, id: %r, genre: %r", name, raw_id, genre)

    try:
        movie_id = parse_movie_id(raw_id)
    except ValueError:
        return _envelope(400, False, INVALID_ID_MESSAGE)

    try:
        results = search_movies(catalog, name=name, movie_id=movie_id, genre=genre)
        return _envelope(200, True, search_message(len(results)), results)
    except Exception:
        logger.exception("Error occurred during movie search")
        return _envelope(500, False, SEARCH_ERROR_MESSAGE)


@router.get("/search/form", include_in_schema=False)
def search_movies_form(
    request: Request,
    name: str | None = Query(None),
    raw_id: str | None = Query(None, alias="id"),
    genre: str | None = Query(None),
    catalog: Catalog = Depends(get_catalog),
    templates: Jinja2Templates = Depends(get_templates),
):
    """HTML form search; renders the movies page with the results."""
    logger.info("HTML form search request - name: %r, id: %r, genre: %r", name, raw_id, genre)

    try:
        movie_id = parse_movie_id(raw_id)
    except ValueError:
        model = {
            "error": INVALID_ID_MESSAGE,
            "movies": catalog.all(),
            "genres": catalog.genres(),
        }
        return templates.TemplateResponse(request, "movies.html", model)

    try:
        results = search_movies(catalog, name=name, movie_id=movie_id, genre=genre)
        model = {
            "movies": results,
            "genres": catalog.genres(),
            # Echo the form state back
            "searchName": name,
            "searchId": movie_id,
            "searchGenre": genre,
            "searchMessage": search_message(len(results)),
        }
    except Exception:
        logger.exception("Error occurred during HTML form search")
        model = {
            "error": SEARCH_ERROR_MESSAGE,
            "movies": catalog.all(),
            "genres": catalog.genres(),
        }

    return templates.TemplateResponse(request, "movies.html", model)


@router.get("/{movie_id}/details", include_in_schema=False)
def get_movie_details(
    request: Request,
    movie_id: int,
    catalog: Catalog = Depends(get_catalog),
    review_service: ReviewService = Depends(get_review_service),
    templates: Jinja2Templates = Depends(get_templates),
):
    """Movie details page with icon and reviews."""
    logger.info("Fetching details for movie ID: %d", movie_id)

    movie = catalog.by_id(movie_id)
    if movie is None:
        logger.warning("Movie with ID %d not found", movie_id)
        return templates.TemplateResponse(
            request,
            "error.html",
            {
                "title": "Movie Not Found",
                "message": f"Movie with ID {movie_id} was not found.",
            },
            status_code=404,
        )

    return templates.TemplateResponse(
        request,
        "movie-details.html",
        {
            "movie": movie,
            "movieIcon": get_movie_icon(movie.movie_name),
            "allReviews": review_service.get_reviews_for_movie(movie.id),
        },
    )
