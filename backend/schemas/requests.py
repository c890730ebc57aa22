"""Request body models for the Blog Posts API."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class PostCreate(BaseModel):
    """Body of POST /posts. Presence of title/body is checked by the handler."""

    model_config = ConfigDict(extra="ignore")

    title: Optional[Any] = None
    body: Optional[Any] = None
    author: Optional[Any] = None


class PostUpdate(BaseModel):
    """Body of PATCH /posts. Unknown keys are dropped; only fields sent are applied."""

    model_config = ConfigDict(extra="ignore")

    title: Optional[Any] = None
    body: Optional[Any] = None
    author: Optional[Any] = None

    def updates(self) -> dict:
        return self.model_dump(exclude_unset=True)
