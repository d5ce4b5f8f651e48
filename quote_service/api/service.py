"""FastAPI application exposing CRUD operations over quotes."""

import logging
import uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Annotated, Final

import uvicorn
from fastapi import Depends, FastAPI, Request, Response, status
from fastapi.responses import JSONResponse

from ..storage.models import Quote
from ..storage.quote_storage import QuoteStorage
from . import handlers
from .handlers import Err, ErrorKind, Ok
from .models import ErrorResponse, HealthResponse, QuotePayload
from .settings import api_settings

ERROR_INTERNAL_ERROR: Final[str] = "internal_error"
ERROR_NOT_FOUND: Final[str] = "not_found"

ERROR_STATUS_CODES: Final[dict[ErrorKind, int]] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.STORE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

logger = logging.getLogger(__name__)


def get_quote_storage(request: Request) -> QuoteStorage:
    """
    Dependency function to provide the shared storage handle.

    Returns:
        QuoteStorage: Storage created at application startup
    """
    return request.app.state.storage


StorageDep = Annotated[QuoteStorage, Depends(get_quote_storage)]


def error_response(error: Err) -> JSONResponse:
    """Translate a failed operation into a generic error response."""
    status_code = ERROR_STATUS_CODES[error.kind]
    match error.kind:
        case ErrorKind.NOT_FOUND:
            content = ErrorResponse(error=ERROR_NOT_FOUND, message="Resource not found")
        case _:
            content = ErrorResponse(
                error=ERROR_INTERNAL_ERROR, message="An internal server error occurred"
            )
    return JSONResponse(status_code=status_code, content=content.model_dump())


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the shared storage on startup and close it on shutdown."""
    storage = QuoteStorage()
    await storage.initialize()
    app.state.storage = storage
    logger.info(f"Quote storage ready at {storage.database_path}")
    try:
        yield
    finally:
        await storage.close()


app = FastAPI(
    title=api_settings.api_title,
    description=api_settings.api_description,
    version=api_settings.api_version,
    lifespan=lifespan,
)


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


@app.post("/quotes", response_model=Quote, status_code=status.HTTP_201_CREATED)
async def create_quote(
    storage: StorageDep, payload: QuotePayload
) -> Quote | JSONResponse:
    """Create a quote; id and timestamps are assigned by the server."""
    match await handlers.create_quote(storage, payload):
        case Ok(quote):
            return quote
        case Err() as error:
            return error_response(error)


@app.get("/quotes", response_model=list[Quote])
async def list_quotes(storage: StorageDep) -> list[Quote] | JSONResponse:
    """List every stored quote."""
    match await handlers.list_quotes(storage):
        case Ok(quotes):
            return quotes
        case Err() as error:
            return error_response(error)


@app.api_route("/quotes/{quote_id}", methods=["PUT", "PATCH"])
async def update_quote(
    storage: StorageDep, quote_id: uuid.UUID, payload: QuotePayload
) -> Response:
    """Replace book and quote text of an existing quote."""
    match await handlers.update_quote(storage, quote_id, payload):
        case Ok():
            return Response(status_code=status.HTTP_200_OK)
        case Err() as error:
            return error_response(error)


@app.delete("/quotes/{quote_id}")
async def delete_quote(storage: StorageDep, quote_id: uuid.UUID) -> Response:
    """Delete a quote."""
    match await handlers.delete_quote(storage, quote_id):
        case Ok():
            return Response(status_code=status.HTTP_200_OK)
        case Err() as error:
            return error_response(error)


@app.exception_handler(404)
async def not_found_handler(_: Request, __: Exception) -> JSONResponse:
    """Handle 404 errors for unknown routes.

    Returns:
        JSONResponse: Error response in JSON format
    """
    return error_response(Err(ErrorKind.NOT_FOUND))


@app.exception_handler(500)
async def internal_error_handler(_: Request, exc: Exception) -> JSONResponse:
    """Handle internal server errors.

    Args:
        exc: The exception that was raised

    Returns:
        JSONResponse: Error response in JSON format
    """
    logger.error(f"Internal server error: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            error=ERROR_INTERNAL_ERROR, message="An internal server error occurred"
        ).model_dump(),
    )


async def main() -> None:
    """Main entry point for the API server."""
    config = uvicorn.Config(
        app,
        host=api_settings.api_host,
        port=api_settings.api_port,
        log_level=api_settings.log_level.lower(),
    )
    server = uvicorn.Server(config)
    await server.serve()


if __name__ == "__main__":
    import asyncio

    asyncio.run(main())
