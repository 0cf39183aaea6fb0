"""API key comparison."""

import hmac
from typing import Optional


def api_key_matches(supplied: Optional[str], expected: str) -> bool:
    """Compare a supplied API key with the configured one in constant time.

    Args:
        supplied: Key sent by the caller (may be None)
        expected: Configured API key

    Returns:
        True if the keys are equal
    """
    if not isinstance(supplied, str):
        return False
    return hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))
