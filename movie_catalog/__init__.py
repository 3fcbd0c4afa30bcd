"""
Movie Catalog Application Package.

This package contains the in-memory movie catalog, the search logic over it,
and the FastAPI application that exposes both as JSON and HTML endpoints.
"""

__version__ = "1.0.0"
