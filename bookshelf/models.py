# bookshelf/models.py
from typing import Optional

from pydantic import BaseModel, ConfigDict


class BookPayload(BaseModel):
    """Request body for creating or replacing a book.

    Every field is optional at the schema level: the store decides
    which combinations are acceptable so that it can answer with its
    own messages instead of a generic schema error. Unknown keys
    (including ``id``, ``finished`` and the timestamps) are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    year: Optional[int] = None
    author: Optional[str] = None
    summary: Optional[str] = None
    publisher: Optional[str] = None
    pageCount: Optional[int] = None
    readPage: Optional[int] = None
    reading: Optional[bool] = None


class Book(BaseModel):
    id: str
    name: str
    year: Optional[int] = None
    author: Optional[str] = None
    summary: Optional[str] = None
    publisher: Optional[str] = None
    pageCount: Optional[int] = None
    readPage: Optional[int] = None
    finished: bool
    reading: Optional[bool] = None
    insertedAt: str
    updatedAt: str


class BookSummary(BaseModel):
    id: str
    name: str
    publisher: Optional[str] = None

