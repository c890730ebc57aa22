"""In-memory implementation of StoreProtocol, used as the injected store in tests."""

import copy
import threading
from contextlib import contextmanager
from typing import Optional

from .base import StoreError


class MemoryStore:
    """Keeps the collection in a list. Copies on the way in and out."""

    def __init__(self, posts: Optional[list] = None):
        self._posts = copy.deepcopy(posts or [])
        self._lock = threading.RLock()
        self.read_error: Optional[StoreError] = None
        self.write_error: Optional[StoreError] = None
        self.writes = 0

    def read(self) -> list:
        if self.read_error:
            raise self.read_error
        return copy.deepcopy(self._posts)

    def write(self, posts: list) -> None:
        if self.write_error:
            raise self.write_error
        with self._lock:
            self._posts = copy.deepcopy(posts)
            self.writes += 1

    @contextmanager
    def transaction(self):
        with self._lock:
            yield self
