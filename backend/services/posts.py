"""
Blog post handlers: list, get, create, update, delete.

Each handler is a plain function of (input, store). Storage is read fresh on
every call; mutations write the full collection back inside the store's
transaction so in-process writers never interleave a read-modify-write cycle.
Failures are raised as PostError subclasses carrying an HTTP status and a
message meant for the client.
"""

import logging
import math
import re
from datetime import datetime, timezone
from typing import Any, Optional, Union

from repositories import InvalidJsonError, NotArrayError, StoreError, StoreProtocol
from schemas.requests import PostCreate, PostUpdate

logger = logging.getLogger(__name__)

Number = Union[int, float]

DEFAULT_AUTHOR = "anonymous"
UPDATABLE_FIELDS = ("title", "body", "author")

PATH_ID_ERROR = "Path parameter :id must be a number"
QUERY_ID_ERROR = "Query parameter ?id=<number> is required"
REQUIRED_FIELDS_ERROR = "title and body are required"
EMPTY_UPDATE_ERROR = "Provide at least one of: " + ", ".join(UPDATABLE_FIELDS)
MALFORMED_BODY_ERROR = "Malformed JSON body"

_DECIMAL_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_PREFIXED_RE = re.compile(r"0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


class PostError(Exception):
    """Base for handler failures with the status code the API should answer with."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class BadRequestError(PostError):
    status_code = 400


class NotFoundError(PostError):
    status_code = 404

    def __init__(self, post_id: Number):
        self.post_id = post_id
        super().__init__(f"Post with id {post_id} not found")


class StorageCorruptError(PostError):
    status_code = 500


class StorageIOError(PostError):
    status_code = 500


# ── Identifier helpers ─────────────────────────────────────────────────

def _parse_number(text: str) -> Optional[Number]:
    text = text.strip()
    if not text:
        return 0
    if _PREFIXED_RE.fullmatch(text):
        value = int(text, 0)
        # Beyond float range counts as Infinity.
        return value if value.bit_length() <= 1024 else None
    if not _DECIMAL_RE.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return int(value) if value.is_integer() else value


def parse_post_id(token: Any, message: str = PATH_ID_ERROR) -> Number:
    """Parse a client-supplied id into a finite number or raise BadRequestError."""
    if isinstance(token, bool) or token is None:
        raise BadRequestError(message)
    if isinstance(token, (int, float)):
        value = token
    else:
        value = _parse_number(str(token))
    if value is None or (isinstance(value, float) and not math.isfinite(value)):
        raise BadRequestError(message)
    return value


def coerce_post_id(value: Any) -> Optional[Number]:
    """Numeric view of a stored post_id, or None when it is missing or not a number."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str) and value.strip():
        return _parse_number(value)
    return None


def _stored_id(post: Any) -> Optional[Number]:
    return coerce_post_id(post.get("post_id")) if isinstance(post, dict) else None


def find_index(posts: list, post_id: Number) -> int:
    """Position of the first post whose id equals post_id, or -1."""
    for i, post in enumerate(posts):
        if _stored_id(post) == post_id:
            return i
    return -1


def next_post_id(posts: list) -> Number:
    """One past the largest numeric id; missing or non-numeric ids count as 0."""
    top = max([0, *(_stored_id(p) or 0 for p in posts)]) + 1
    return int(top) if isinstance(top, float) and top.is_integer() else top


# ── Misc helpers ───────────────────────────────────────────────────────

def utc_timestamp() -> str:
    """Current time as ISO-8601 UTC with millisecond precision, e.g. 2024-01-02T03:04:05.678Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _is_blank(value: Any) -> bool:
    if isinstance(value, float) and math.isnan(value):
        return True
    return value is None or value is False or value == "" or (
        isinstance(value, (int, float)) and value == 0
    )


def _require_finite(payload: Any) -> None:
    """Reject NaN/Infinity anywhere in a request body; they are not valid JSON."""
    if isinstance(payload, float) and not math.isfinite(payload):
        raise BadRequestError(MALFORMED_BODY_ERROR)
    if isinstance(payload, dict):
        payload = list(payload.values())
    if isinstance(payload, list):
        for item in payload:
            _require_finite(item)


def _as_dict(payload: Any) -> dict:
    return payload if isinstance(payload, dict) else {}


def _load(store: StoreProtocol) -> list:
    try:
        return store.read()
    except (InvalidJsonError, NotArrayError) as e:
        raise StorageCorruptError(e.message) from e
    except StoreError as e:
        raise StorageIOError(e.message) from e


def _save(store: StoreProtocol, posts: list) -> None:
    try:
        store.write(posts)
    except StoreError as e:
        raise StorageIOError("Error writing file") from e


# ── Handlers ───────────────────────────────────────────────────────────

def list_posts(store: StoreProtocol) -> list:
    return _load(store)


def get_post(store: StoreProtocol, token: Any) -> dict:
    post_id = parse_post_id(token, PATH_ID_ERROR)
    posts = _load(store)
    idx = find_index(posts, post_id)
    if idx == -1:
        raise NotFoundError(post_id)
    return posts[idx]


def create_post(store: StoreProtocol, payload: Any) -> dict:
    """Append a new post with the next free id. Returns the stored record."""
    _require_finite(payload)
    data = PostCreate.model_validate(_as_dict(payload))
    if _is_blank(data.title) or _is_blank(data.body):
        raise BadRequestError(REQUIRED_FIELDS_ERROR)

    with store.transaction():
        posts = _load(store)
        post = {
            "post_id": next_post_id(posts),
            "title": data.title,
            "author": DEFAULT_AUTHOR if _is_blank(data.author) else data.author,
            "body": data.body,
            "created_at": utc_timestamp(),
        }
        posts.append(post)
        _save(store, posts)

    logger.info("Created post %s", post["post_id"])
    return post


def update_post(store: StoreProtocol, token: Any, payload: Any) -> dict:
    """
    Shallow-merge title/body/author from payload into the post with the given id.
    updated_at is stamped last so it always reflects this update.
    """
    _require_finite(payload)
    if token is None or token == "":
        raise BadRequestError(QUERY_ID_ERROR)
    post_id = parse_post_id(token, QUERY_ID_ERROR)

    updates = PostUpdate.model_validate(_as_dict(payload)).updates()
    if not updates:
        raise BadRequestError(EMPTY_UPDATE_ERROR)

    with store.transaction():
        posts = _load(store)
        idx = find_index(posts, post_id)
        if idx == -1:
            raise NotFoundError(post_id)
        updated = {**posts[idx], **updates, "updated_at": utc_timestamp()}
        posts[idx] = updated
        _save(store, posts)

    logger.info("Updated post %s (%s)", post_id, ", ".join(sorted(updates)))
    return updated


def delete_post(store: StoreProtocol, token: Any) -> dict:
    """Remove the first post with the given id. Returns {"deleted": post}."""
    post_id = parse_post_id(token, PATH_ID_ERROR)

    with store.transaction():
        posts = _load(store)
        idx = find_index(posts, post_id)
        if idx == -1:
            raise NotFoundError(post_id)
        deleted = posts.pop(idx)
        _save(store, posts)

    logger.info("Deleted post %s", post_id)
    return {"deleted": deleted}
