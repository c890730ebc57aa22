"""Shared pytest fixtures: stores and a TestClient bound to them."""

import pytest
from fastapi.testclient import TestClient

from api.deps import get_store
from main import create_app
from repositories import FileStore, MemoryStore


SAMPLE_POSTS = [
    {
        "post_id": 1,
        "title": "First",
        "author": "ada",
        "body": "Hello there",
        "created_at": "2024-01-01T00:00:00.000Z",
    },
    {
        "post_id": 2,
        "title": "Second",
        "author": "anonymous",
        "body": "Another one",
        "created_at": "2024-01-02T00:00:00.000Z",
    },
]


@pytest.fixture()
def memory_store():
    return MemoryStore(SAMPLE_POSTS)


@pytest.fixture()
def data_file(tmp_path, monkeypatch):
    path = tmp_path / "data" / "blog.json"
    monkeypatch.setenv("BLOG_DATA_FILE", str(path))
    return path


@pytest.fixture()
def file_store(data_file):
    return FileStore(data_file)


@pytest.fixture()
def client(memory_store):
    app = create_app()
    app.dependency_overrides[get_store] = lambda: memory_store
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def file_client(data_file):
    """Client wired to the real FileStore through BLOG_DATA_FILE."""
    with TestClient(create_app()) as c:
        yield c
