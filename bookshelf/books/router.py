"""
Route definitions for the books API.

Endpoints:
- POST   /books            : add a book
- GET    /books            : list books, optionally filtered by name/reading/finished
- GET    /books/{book_id}  : full record of one book
- PUT    /books/{book_id}  : replace a book
- DELETE /books/{book_id}  : remove a book

Every response uses the same envelope: ``{"status": "success" | "fail",
"message": ..., "data": ...}`` where ``message`` and ``data`` are only
present when there is something to say.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ..errors import BookStoreError
from ..models import BookPayload
from ..storage import BookStore, get_store


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/books", tags=["books"])


def envelope(
    status: str,
    message: Optional[str] = None,
    data: Optional[Dict[str, Any]] = None,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    body: Dict[str, Any] = {"status": status}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return JSONResponse(status_code=status_code, content=body, headers=headers)


def fail(exc: BookStoreError) -> JSONResponse:
    logger.info("Rejected %s request: %s", exc.action, exc.kind)
    return envelope("fail", message=exc.message, status_code=exc.status_code)


def _parse_flag(value: Optional[str]) -> Optional[bool]:
    """``"1"`` means true, any other present value false, absent means no filter."""
    if value is None:
        return None
    return value == "1"


@router.post("", status_code=201)
def add_book(payload: BookPayload, store: BookStore = Depends(get_store)):
    try:
        book_id = store.add_book(payload)
    except BookStoreError as exc:
        return fail(exc)
    return envelope(
        "success",
        message="Book added successfully",
        data={"bookId": book_id},
        status_code=201,
    )


@router.get("")
def list_books(
    name: Optional[str] = Query(default=None, description="Case-insensitive name search"),
    reading: Optional[str] = Query(default=None, description="1 for books being read, 0 otherwise"),
    finished: Optional[str] = Query(default=None, description="1 for finished books, 0 otherwise"),
    store: BookStore = Depends(get_store),
):
    books = store.list_books(
        name=name,
        reading=_parse_flag(reading),
        finished=_parse_flag(finished),
    )
    return envelope("success", data={"books": [b.model_dump() for b in books]})


@router.get("/{book_id}")
def get_book(book_id: str, store: BookStore = Depends(get_store)):
    try:
        book = store.get_book(book_id)
    except BookStoreError as exc:
        return fail(exc)
    return envelope("success", data={"book": book.model_dump()})


@router.put("/{book_id}")
def update_book(book_id: str, payload: BookPayload, store: BookStore = Depends(get_store)):
    try:
        store.update_book(book_id, payload)
    except BookStoreError as exc:
        return fail(exc)
    return envelope("success", message="Book updated successfully")


@router.delete("/{book_id}")
def delete_book(book_id: str, store: BookStore = Depends(get_store)):
    try:
        store.delete_book(book_id)
    except BookStoreError as exc:
        return fail(exc)
    return envelope("success", message="Book deleted successfully")
