"""Pydantic schemas for API request/response."""

from .requests import PostCreate, PostUpdate

__all__ = [
    "PostCreate",
    "PostUpdate",
]
