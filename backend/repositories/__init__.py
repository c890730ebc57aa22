"""Persistence layer: abstract interface and implementations."""

from .base import (
    InvalidJsonError,
    NotArrayError,
    StoreError,
    StoreIOError,
    StoreProtocol,
)
from .file_store import FileStore
from .memory_store import MemoryStore

__all__ = [
    "StoreProtocol",
    "StoreError",
    "InvalidJsonError",
    "NotArrayError",
    "StoreIOError",
    "FileStore",
    "MemoryStore",
]
