"""Core slug resolution and registration logic."""

from .resolver import SlugResolver, RedirectTarget
from .registrar import SlugRegistrar

__all__ = ["SlugResolver", "RedirectTarget", "SlugRegistrar"]
