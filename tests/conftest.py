import itertools
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from bookshelf.main import app
from bookshelf.storage import BookStore, get_store


START = datetime(2024, 1, 1)


class FakeClock:
    """Hands out increasing, well-formed timestamps."""

    def __init__(self):
        self._ticks = itertools.count()

    def __call__(self) -> str:
        return (START + timedelta(seconds=next(self._ticks))).isoformat(timespec="milliseconds") + "Z"


@pytest.fixture
def store():
    ids = itertools.count(1)
    return BookStore(id_factory=lambda: f"book-{next(ids)}", clock=FakeClock())


@pytest.fixture
def client(store):
    # Each test gets its own empty collection
    app.dependency_overrides[get_store] = lambda: store
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.pop(get_store, None)


@pytest.fixture
def add_book(client):
    def _add(**fields):
        payload = {
            "name": "Dicoding",
            "year": 2020,
            "author": "Dicoding Indonesia",
            "summary": "Belajar backend",
            "publisher": "Dicoding",
            "pageCount": 100,
            "readPage": 25,
            "reading": False,
        }
        payload.update(fields)
        response = client.post("/books", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["data"]["bookId"]

    return _add
