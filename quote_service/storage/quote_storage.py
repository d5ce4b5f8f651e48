"""
Storage interface for quotes using async SQLite.
"""

import asyncio
import logging
import uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

import aiosqlite

from .models import Quote
from .settings import storage_settings

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when a statement against the quotes table fails."""


class QuoteStorage:
    """Async SQLite-based storage for quotes.

    The storage object is a shared handle: every operation borrows its own
    connection for the duration of a single statement and returns it when
    done, so one instance can serve concurrent requests.
    """

    def __init__(
        self, database_path: str | None = None, max_connections: int | None = None
    ):
        """Initialize the quote storage."""
        self.database_path = database_path or storage_settings.database_path
        self.max_connections = max_connections or storage_settings.max_connections
        self._slots = asyncio.Semaphore(self.max_connections)
        self._closed = False

    async def initialize(self) -> None:
        """Create the quotes table if it doesn't exist."""
        self._closed = False
        await self._create_tables()

    @asynccontextmanager
    async def connection(self) -> AsyncGenerator[aiosqlite.Connection, None]:
        """Borrow a database connection, releasing it on exit."""
        if self._closed:
            raise StorageError("Storage is closed")

        async with self._slots:
            try:
                connection = await aiosqlite.connect(self.database_path)
            except aiosqlite.Error as e:
                logger.error(f"Failed to connect to {self.database_path}: {e}")
                raise StorageError("Failed to connect to database") from e

            connection.row_factory = aiosqlite.Row
            try:
                yield connection
            except aiosqlite.Error as e:
                logger.error(f"Database error: {e}")
                raise StorageError("Database statement failed") from e
            finally:
                await connection.close()

    async def _create_tables(self) -> None:
        """Create the quotes table if it doesn't exist."""
        async with self.connection() as connection:
            await connection.execute("""
                CREATE TABLE IF NOT EXISTS quotes (
                    id TEXT PRIMARY KEY,
                    book TEXT NOT NULL,
                    quote TEXT NOT NULL,
                    inserted_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)
            await connection.commit()

    async def insert_quote(self, quote: Quote) -> None:
        """Insert a new quote row."""
        async with self.connection() as connection:
            await connection.execute(
                """
                INSERT INTO quotes (id, book, quote, inserted_at, updated_at)
                VALUES (?, ?, ?, ?, ?)
            """,
                (
                    str(quote.id),
                    quote.book,
                    quote.quote,
                    quote.inserted_at.isoformat(),
                    quote.updated_at.isoformat(),
                ),
            )
            await connection.commit()

        logger.info(f"Inserted quote {quote.id}")

    async def list_quotes(self) -> list[Quote]:
        """Fetch every quote in the table."""
        async with (
            self.connection() as connection,
            connection.execute(
                """
                SELECT id, book, quote, inserted_at, updated_at
                FROM quotes
            """
            ) as cursor,
        ):
            rows = await cursor.fetchall()

        logger.debug(f"Fetched {len(rows)} quotes")
        return [self._row_to_quote(row) for row in rows]

    async def update_quote(self, quote_id: uuid.UUID, book: str, quote: str) -> int:
        """
        Replace book and quote text of a stored quote and bump updated_at.

        Args:
            quote_id: Identifier of the quote to update
            book: New book value
            quote: New quote text

        Returns:
            Number of rows that matched the identifier
        """
        updated_at = datetime.now(UTC)

        async with self.connection() as connection:
            async with connection.execute(
                """
                UPDATE quotes
                SET book = ?, quote = ?, updated_at = ?
                WHERE id = ?
            """,
                (book, quote, updated_at.isoformat(), str(quote_id)),
            ) as cursor:
                updated_count = cursor.rowcount
            await connection.commit()

        if updated_count > 0:
            logger.info(f"Updated quote {quote_id}")
        return updated_count

    async def delete_quote(self, quote_id: uuid.UUID) -> int:
        """
        Delete a stored quote.

        Args:
            quote_id: Identifier of the quote to delete

        Returns:
            Number of rows removed
        """
        async with self.connection() as connection:
            async with connection.execute(
                """
                DELETE FROM quotes
                WHERE id = ?
            """,
                (str(quote_id),),
            ) as cursor:
                deleted_count = cursor.rowcount
            await connection.commit()

        if deleted_count > 0:
            logger.info(f"Deleted quote {quote_id}")
        return deleted_count

    @staticmethod
    def _row_to_quote(row: aiosqlite.Row) -> Quote:
        return Quote(
            id=uuid.UUID(row["id"]),
            book=row["book"],
            quote=row["quote"],
            inserted_at=datetime.fromisoformat(row["inserted_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )

    async def close(self) -> None:
        """Stop handing out connections and wait for borrowed ones to return."""
        if self._closed:
            return
        self._closed = True

        for _ in range(self.max_connections):
            await self._slots.acquire()
        for _ in range(self.max_connections):
            self._slots.release()

        logger.info(f"Quote storage at {self.database_path} closed")
