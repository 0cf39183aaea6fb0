"""Common utilities for the slug redirect service."""

from .validators import is_valid_url, is_valid_slug
from .credentials import api_key_matches
from .logging_config import setup_logging, get_logger

__all__ = [
    "is_valid_url",
    "is_valid_slug",
    "api_key_matches",
    "setup_logging",
    "get_logger",
]
