# bookshelf/main.py
import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .books import books_router
from .books.router import envelope
from .config import settings
from .storage import BookStore, get_store


logger = logging.getLogger(__name__)


def configure_logging(level: str = settings.log_level) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        yield
    finally:
        # the collection never outlives the process
        get_store().clear()


app = FastAPI(
    title=settings.app_name,
    description="In-memory bookshelf: add, list, read, update and delete books.",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(books_router)


@app.exception_handler(RequestValidationError)
async def invalid_payload_handler(request: Request, exc: RequestValidationError):
    logger.info("Invalid payload on %s %s: %s", request.method, request.url.path, exc.errors())
    return envelope("fail", message="Invalid request payload", status_code=400)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return envelope(
        "fail",
        message=str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


@app.get("/")
def health_check(store: BookStore = Depends(get_store)):
    return envelope("success", message="Bookshelf API is running", data={"books": store.count()})


class BookshelfServer(uvicorn.Server):
    """uvicorn server that announces the address only once it is bound."""

    async def startup(self, sockets=None):
        await super().startup(sockets=sockets)
        if self.started:
            logger.info("%s started, serving %s", settings.app_name, settings.base_url)


def build_server() -> BookshelfServer:
    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return BookshelfServer(config)


def run() -> None:
    configure_logging()
    server = build_server()
    try:
        server.run()
    except SystemExit:
        # uvicorn exits on its own when the socket cannot be bound
        if server.started:
            raise
        logger.exception("Server failed to start on %s", settings.base_url)
        sys.exit(1)
    if not server.started:
        logger.error("Server failed to start on %s", settings.base_url)
        sys.exit(1)


if __name__ == "__main__":
    run()
