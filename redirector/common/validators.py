"""Validation utilities for slug registration."""

import re
from urllib.parse import urlparse
from typing import Tuple


MAX_URL_LENGTH = 2048

# RFC 3986 section 3.1
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*$")
_WHITESPACE_RE = re.compile(r"\s")
# RFC 3986 section 2: unreserved, reserved and percent signs
_URI_CHARS_RE = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]*")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate that a value is a syntactically valid absolute URI.

    Any scheme is accepted (https, mailto, ...); a scheme and a non-empty
    remainder are required. Only RFC 3986 characters are allowed; non-ASCII
    text must be percent-encoded.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"

    if len(url) > MAX_URL_LENGTH:
        return False, f"URL is too long (max {MAX_URL_LENGTH} characters)"

    if _WHITESPACE_RE.search(url):
        return False, "URL must not contain whitespace"

    if not _URI_CHARS_RE.fullmatch(url):
        return False, "URL contains characters not allowed in a URI"

    if _BAD_ESCAPE_RE.search(url):
        return False, "URL contains an invalid percent-escape"

    scheme, sep, rest = url.partition(":")
    if not sep or not _SCHEME_RE.match(scheme):
        return False, "URL must be an absolute URI with a scheme"

    if not rest:
        return False, "URL must not be empty after the scheme"

    try:
        result = urlparse(url)
        # Raises ValueError on a bad port or IPv6 literal
        result.port
    except ValueError as e:
        return False, f"Invalid URL format: {str(e)}"

    if rest.startswith("//") and not result.netloc:
        return False, "URL must have a valid host"

    return True, ""


def is_valid_slug(slug: str) -> Tuple[bool, str]:
    """Validate a slug.

    Slugs are opaque keys; the only requirement is a non-empty string.

    Args:
        slug: The slug to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not slug or not isinstance(slug, str):
        return False, "Slug is required"

    return True, ""
