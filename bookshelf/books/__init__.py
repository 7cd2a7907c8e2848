"""
HTTP layer for the book collection.

The router defined here translates requests into calls on
:class:`bookshelf.storage.BookStore` and wraps every result, successful
or not, in the ``status``/``message``/``data`` envelope that clients
expect. Domain errors raised by the store are rendered here as well, so
the application only has to deal with framework-level failures.
"""

from .router import router as books_router  # noqa: F401
