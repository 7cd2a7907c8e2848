# bookshelf/errors.py
"""
Domain errors raised by the book store.

The router catches these and renders them into the ``fail`` envelope,
so none of them ever reaches the ASGI server. Each error carries a
``kind`` (a short machine-readable tag) and the HTTP status the router
should answer with.
"""

from typing import Optional


class BookStoreError(Exception):
    kind = "error"
    status_code = 500

    def __init__(self, message: str, action: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.action = action


class BookValidationError(BookStoreError, ValueError):
    """A write was rejected before touching the collection."""

    status_code = 400


class MissingNameError(BookValidationError):
    kind = "missing-name"

    def __init__(self, action: str = "add"):
        super().__init__(
            f"Failed to {action} book. Please fill in the book name",
            action,
        )


class ReadPageExceedsPageCountError(BookValidationError):
    kind = "readpage-exceeds-pagecount"

    def __init__(self, action: str = "add"):
        super().__init__(
            f"Failed to {action} book. "
            "readPage cannot be greater than pageCount",
            action,
        )


class BookNotFoundError(BookStoreError, LookupError):
    kind = "not-found"
    status_code = 404

    def __init__(self, book_id: str, action: str = "get"):
        if action == "get":
            message = "Book not found"
        else:
            message = f"Failed to {action} book. Id not found"
        super().__init__(message, action)
        self.book_id = book_id
