"""Store protocol and the storage failures it can raise."""

from contextlib import AbstractContextManager
from typing import Protocol


class StoreError(Exception):
    """Base for storage failures. `message` is safe to show to API clients."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidJsonError(StoreError):
    def __init__(self, message: str = "Invalid JSON in file"):
        super().__init__(message)


class NotArrayError(StoreError):
    def __init__(self, message: str = "The outermost JSON must be an array"):
        super().__init__(message)


class StoreIOError(StoreError):
    def __init__(self, message: str = "Error reading file"):
        super().__init__(message)


class StoreProtocol(Protocol):
    """The post collection as a whole: read it all, write it all back."""

    def read(self) -> list:
        ...

    def write(self, posts: list) -> None:
        ...

    def transaction(self) -> AbstractContextManager:
        """Hold exclusive access for one read-modify-write cycle."""
        ...
