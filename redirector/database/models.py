"""Data models and store results for the slug redirect service."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Mapping:
    """Represents a slug to URL mapping in the store."""

    slug: str
    url: str

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"slug": self.slug, "url": self.url}


# Lookup results

@dataclass(frozen=True)
class Found:
    mapping: Mapping


@dataclass(frozen=True)
class Missing:
    slug: str


@dataclass(frozen=True)
class LookupFailed:
    slug: str
    error: BaseException


LookupResult = Union[Found, Missing, LookupFailed]


# Insert results

@dataclass(frozen=True)
class Created:
    mapping: Mapping


@dataclass(frozen=True)
class Conflict:
    slug: str


@dataclass(frozen=True)
class InsertFailed:
    slug: str
    error: BaseException


InsertResult = Union[Created, Conflict, InsertFailed]
