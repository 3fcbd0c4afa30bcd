"""
FastAPI application entry point for the Movie Catalog.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from movie_catalog import __version__
from movie_catalog.api.config import (
    get_api_host,
    get_api_port,
    get_log_dir,
    get_log_file,
    get_log_level,
)
from movie_catalog.api.dependencies import get_catalog, get_review_service
from movie_catalog.api.routers import movies, system
from movie_catalog.utils.logging_config import configure_api_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Data files are read once, before the first request is served
    catalog = get_catalog()
    review_service = get_review_service()
    logger.info(
        "Movie catalog ready: %d movies, %d genres, %d reviews",
        len(catalog),
        len(catalog.genres()),
        review_service.count(),
    )
    yield


app = FastAPI(
    title="Movie Catalog",
    description="Read-only movie catalog with search and details pages",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(movies.router)
app.include_router(system.router)


@app.get("/", include_in_schema=False)
def root():
    """Root endpoint."""
    return RedirectResponse("/movies")


def run() -> None:
    """Run the application with uvicorn."""
    configure_api_logging(level=get_log_level(), log_file=get_log_file(), log_dir=get_log_dir())
    uvicorn.run(app, host=get_api_host(), port=get_api_port(), log_config=None)


if __name__ == "__main__":
    run()
