"""
File-based implementation of StoreProtocol.
The whole post collection lives in one JSON file holding a top-level array.
"""

import json
import logging
import threading
from contextlib import contextmanager, suppress
from pathlib import Path

from .base import InvalidJsonError, NotArrayError, StoreIOError

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    raise ValueError(f"Unsupported JSON constant {name!r}")


class FileStore:
    """Reads the full collection from disk on every call; never caches."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.RLock()

    def read(self) -> list:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = f.read()
        except FileNotFoundError:
            return []
        except UnicodeDecodeError:
            logger.warning("Storage file %s is not valid UTF-8", self.path)
            raise InvalidJsonError()
        except OSError as e:
            logger.error("Could not read %s: %s", self.path, e)
            raise StoreIOError("Error reading file") from e

        try:
            data = json.loads(raw, parse_constant=_reject_constant)
        except ValueError as e:
            logger.warning("Storage file %s holds invalid JSON: %s", self.path, e)
            raise InvalidJsonError() from e
        if not isinstance(data, list):
            logger.warning("Storage file %s: outermost value is %s", self.path, type(data).__name__)
            raise NotArrayError()
        return data

    def write(self, posts: list) -> None:
        with self._lock:
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                with open(tmp, "w", encoding="utf-8") as f:
                    json.dump(posts, f, ensure_ascii=False, indent=2, allow_nan=False)
                tmp.replace(self.path)
            except (OSError, TypeError, ValueError) as e:
                logger.error("Could not write %s: %s", self.path, e)
                with suppress(OSError):
                    tmp.unlink(missing_ok=True)
                raise StoreIOError("Error writing file") from e

    @contextmanager
    def transaction(self):
        with self._lock:
            yield self
