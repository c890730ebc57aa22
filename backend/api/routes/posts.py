"""Blog post CRUD over the JSON file store."""

import logging
from typing import Annotated, Any, Optional

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import JSONResponse

from api.deps import get_store
from repositories import StoreProtocol
from services import posts as post_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/posts", tags=["posts"])

Store = Annotated[StoreProtocol, Depends(get_store)]


@router.get("")
async def list_posts(store: Store):
    return JSONResponse(post_service.list_posts(store))


@router.get("/{post_id}")
async def get_post(post_id: str, store: Store):
    return JSONResponse(post_service.get_post(store, post_id))


@router.post("")
async def create_post(store: Store, payload: Annotated[Any, Body()] = None):
    post = post_service.create_post(store, payload)
    return JSONResponse(
        post,
        status_code=201,
        headers={"Location": f"/posts/{post['post_id']}"},
    )


@router.patch("")
async def update_post(
    store: Store,
    post_id: Annotated[Optional[str], Query(alias="id")] = None,
    payload: Annotated[Any, Body()] = None,
):
    return JSONResponse(post_service.update_post(store, post_id, payload))


@router.delete("/{post_id}")
async def delete_post(post_id: str, store: Store):
    return JSONResponse(post_service.delete_post(store, post_id))
