"""FastAPI dependencies for routes."""

from functools import lru_cache
from pathlib import Path

from config import get_settings
from repositories import FileStore


@lru_cache
def _file_store(path: Path) -> FileStore:
    # One store (and one lock) per storage file for the life of the process.
    return FileStore(path)


def get_store() -> FileStore:
    """Return the persistence store for the configured data file. Use in Depends()."""
    return _file_store(get_settings().BLOG_DATA_FILE.resolve())
