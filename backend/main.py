"""
Blog Posts API
CRUD endpoints over a collection of blog posts kept in a single JSON file.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from api.helpers import post_error_handler, validation_error_handler
from api.routes import health_router, posts_router
from config import Settings, get_settings
from services.posts import PostError

logging.basicConfig(level=get_settings().LOG_LEVEL)
logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials="*" not in settings.ALLOWED_ORIGINS,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["Location"],
    )

    app.add_exception_handler(PostError, post_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(health_router)
    app.include_router(posts_router, prefix=settings.API_PREFIX)

    logger.info("Posts stored in %s, mounted at %s", settings.BLOG_DATA_FILE, settings.API_PREFIX or "/")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logger.info("Server is running on port %s", settings.PORT)
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT)
