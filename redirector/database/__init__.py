"""Storage layer for slug mappings."""

from .base import MappingStoreBase
from .postgres import PostgresMappingStore
from .memory import InMemoryMappingStore
from .factory import create_store
from .models import (
    Mapping,
    Found,
    Missing,
    LookupFailed,
    Created,
    Conflict,
    InsertFailed,
)

__all__ = [
    "MappingStoreBase",
    "PostgresMappingStore",
    "InMemoryMappingStore",
    "create_store",
    "Mapping",
    "Found",
    "Missing",
    "LookupFailed",
    "Created",
    "Conflict",
    "InsertFailed",
]
