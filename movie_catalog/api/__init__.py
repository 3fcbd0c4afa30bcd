"""
FastAPI application exposing the movie catalog.
"""
