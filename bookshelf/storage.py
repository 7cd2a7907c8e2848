# bookshelf/storage.py
import logging
import threading
from datetime import datetime, timezone
from typing import Callable, List, Optional
from uuid import uuid4

from .errors import BookNotFoundError, MissingNameError, ReadPageExceedsPageCountError
from .models import Book, BookPayload, BookSummary


logger = logging.getLogger(__name__)


def generate_book_id() -> str:
    return uuid4().hex


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. ``2024-01-31T10:20:30.123Z``."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _validate(payload: BookPayload, action: str) -> None:
    if not payload.name:
        raise MissingNameError(action)
    if (
        payload.readPage is not None
        and payload.pageCount is not None
        and payload.readPage > payload.pageCount
    ):
        raise ReadPageExceedsPageCountError(action)


def _is_finished(payload: BookPayload) -> bool:
    return payload.readPage == payload.pageCount


class BookStore:
    """In-memory, insertion-ordered collection of books.

    Every public method holds ``self._lock`` for its whole body, so a
    write is either fully applied or not at all and readers never see
    a half-updated record. ``id_factory`` and ``clock`` default to
    :func:`generate_book_id` and :func:`utc_timestamp`; tests pass
    deterministic ones.
    """

    def __init__(
        self,
        id_factory: Callable[[], str] = generate_book_id,
        clock: Callable[[], str] = utc_timestamp,
    ):
        self._books: List[Book] = []
        self._id_factory = id_factory
        self._clock = clock
        self._lock = threading.Lock()

    def _find_index(self, book_id: str) -> Optional[int]:
        return next((i for i, b in enumerate(self._books) if b.id == book_id), None)

    def _new_id(self) -> str:
        book_id = self._id_factory()
        # a repeated id would make later lookups ambiguous
        while self._find_index(book_id) is not None:
            logger.warning("ID factory returned an id already in use: %s", book_id)
            book_id = self._id_factory()
        return book_id

    def add_book(self, payload: BookPayload) -> str:
        with self._lock:
            _validate(payload, "add")

            now = self._clock()
            book = Book(
                id=self._new_id(),
                name=payload.name,
                year=payload.year,
                author=payload.author,
                summary=payload.summary,
                publisher=payload.publisher,
                pageCount=payload.pageCount,
                readPage=payload.readPage,
                finished=_is_finished(payload),
                reading=payload.reading,
                insertedAt=now,
                updatedAt=now,
            )
            self._books.append(book)

        logger.info("Added book %s (%r)", book.id, book.name)
        return book.id

    def list_books(
        self,
        name: Optional[str] = None,
        reading: Optional[bool] = None,
        finished: Optional[bool] = None,
    ) -> List[BookSummary]:
        """Return ``id``/``name``/``publisher`` of the books matching every given filter.

        ``name`` is a case-insensitive substring match; an empty string
        is treated like no filter. ``reading`` and ``finished`` must
        match exactly, so a book whose ``reading`` flag was never set
        matches neither ``True`` nor ``False``.
        """
        with self._lock:
            books = list(self._books)

        if name:
            keyword = name.lower()
            books = [b for b in books if keyword in b.name.lower()]
        if reading is not None:
            books = [b for b in books if b.reading is reading]
        if finished is not None:
            books = [b for b in books if b.finished is finished]

        return [BookSummary(id=b.id, name=b.name, publisher=b.publisher) for b in books]

    def get_book(self, book_id: str) -> Book:
        with self._lock:
            index = self._find_index(book_id)
            if index is None:
                raise BookNotFoundError(book_id, "get")
            return self._books[index].model_copy()

    def update_book(self, book_id: str, payload: BookPayload) -> Book:
        with self._lock:
            # a bad payload is reported even when the id is unknown
            _validate(payload, "update")

            index = self._find_index(book_id)
            if index is None:
                raise BookNotFoundError(book_id, "update")

            current = self._books[index]
            book = Book(
                id=current.id,
                name=payload.name,
                year=payload.year,
                author=payload.author,
                summary=payload.summary,
                publisher=payload.publisher,
                pageCount=payload.pageCount,
                readPage=payload.readPage,
                finished=_is_finished(payload),
                reading=payload.reading,
                insertedAt=current.insertedAt,
                updatedAt=self._clock(),
            )
            self._books[index] = book

        logger.info("Updated book %s", book_id)
        return book.model_copy()

    def delete_book(self, book_id: str) -> None:
        with self._lock:
            index = self._find_index(book_id)
            if index is None:
                raise BookNotFoundError(book_id, "delete")
            del self._books[index]

        logger.info("Deleted book %s", book_id)

    def count(self) -> int:
        with self._lock:
            return len(self._books)

    def clear(self) -> None:
        with self._lock:
            self._books.clear()


# Process-wide store used by the HTTP app; empty at startup.
store = BookStore()


def get_store() -> BookStore:
    return store
