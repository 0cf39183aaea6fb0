"""Web application for the slug redirect service."""

from .app_factory import create_app

__all__ = ["create_app"]
