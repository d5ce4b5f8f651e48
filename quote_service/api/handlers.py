"""
Quote operations.

Each operation runs exactly one statement against the storage handle it is
given and reports its outcome as ``Ok`` or ``Err`` instead of raising, so
the HTTP layer only has to translate outcomes into status codes.
"""

import logging
import uuid
from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

from ..storage.models import Quote
from ..storage.quote_storage import QuoteStorage, StorageError
from .models import QuotePayload

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ErrorKind(StrEnum):
    """Ways a quote operation can fail."""

    NOT_FOUND = "not_found"
    STORE_FAILURE = "store_failure"


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Err:
    kind: ErrorKind


Result = Ok[T] | Err


async def create_quote(storage: QuoteStorage, payload: QuotePayload) -> Result[Quote]:
    """Store a new quote built from the payload and return it."""
    quote = Quote.new(payload.book, payload.quote)
    try:
        await storage.insert_quote(quote)
    except StorageError as e:
        logger.error(f"Failed to create quote: {e}")
        return Err(ErrorKind.STORE_FAILURE)
    return Ok(quote)


async def list_quotes(storage: QuoteStorage) -> Result[list[Quote]]:
    """Return every stored quote."""
    try:
        quotes = await storage.list_quotes()
    except StorageError as e:
        logger.error(f"Failed to list quotes: {e}")
        return Err(ErrorKind.STORE_FAILURE)
    return Ok(quotes)


async def update_quote(
    storage: QuoteStorage, quote_id: uuid.UUID, payload: QuotePayload
) -> Result[None]:
    """Replace book and quote text of an existing quote."""
    try:
        updated_count = await storage.update_quote(
            quote_id, payload.book, payload.quote
        )
    except StorageError as e:
        logger.error(f"Failed to update quote {quote_id}: {e}")
        return Err(ErrorKind.STORE_FAILURE)

    if updated_count == 0:
        return Err(ErrorKind.NOT_FOUND)
    return Ok(None)


async def delete_quote(storage: QuoteStorage, quote_id: uuid.UUID) -> Result[None]:
    """Remove a quote."""
    try:
        deleted_count = await storage.delete_quote(quote_id)
    except StorageError as e:
        logger.error(f"Failed to delete quote {quote_id}: {e}")
        return Err(ErrorKind.STORE_FAILURE)

    if deleted_count == 0:
        return Err(ErrorKind.NOT_FOUND)
    return Ok(None)
