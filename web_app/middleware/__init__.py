"""Middleware for the slug redirect web app."""

from .logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
