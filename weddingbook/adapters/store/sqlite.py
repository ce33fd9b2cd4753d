"""SQLite address book store adapter.

Implements AddressBookStorePort using SQLite with aiosqlite for async access.
Each person and wedding is stored as one row holding its adapted JSON
record, so the same validation applies as for the JSON file store.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any

import aiosqlite
from pydantic import ValidationError

from weddingbook.core.errors import DataLoadingError, IllegalValueError
from weddingbook.core.models import AddressBook
from weddingbook.core.ports import AddressBookStorePort

from .json_adapted import JsonAdaptedPerson, JsonAdaptedWedding, JsonSerializableAddressBook

logger = logging.getLogger(__name__)


class SQLiteAddressBookStore(AddressBookStorePort):
    """SQLite-backed address book store with connection pooling and async access."""

    def __init__(self, db_path: str | Path, pool_size: int = 2):
        """Initialize SQLite store with connection pooling.

        Args:
            db_path: Path to SQLite database file.
            pool_size: Number of connections to maintain in the pool.
        """
        self.db_path = Path(db_path)
        self._pool: list[aiosqlite.Connection] = []
        self._pool_lock = asyncio.Lock()
        self._pool_size = pool_size
        self._schema_initialized = False

    async def _get_connection(self) -> aiosqlite.Connection:
        """Get a connection from the pool or create a new one."""
        async with self._pool_lock:
            if self._pool:
                return self._pool.pop()
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        return await aiosqlite.connect(str(self.db_path))

    async def _return_connection(self, conn: aiosqlite.Connection) -> None:
        """Return a connection to the pool."""
        async with self._pool_lock:
            if len(self._pool) < self._pool_size:
                self._pool.append(conn)
                return
        await conn.close()

    async def close(self) -> None:
        """Close all pooled connections."""
        async with self._pool_lock:
            for conn in self._pool:
                await conn.close()
            self._pool.clear()

    async def _init_schema(self) -> None:
        """Initialize database schema on first use.

        Only runs once per instance. Subsequent calls are no-ops.
        """
        if self._schema_initialized:
            return

        conn = await self._get_connection()
        try:
            await conn.execute(
                """
                CREATE TABLE IF NOT EXISTS persons (
                    position INTEGER PRIMARY KEY,
                    name TEXT UNIQUE NOT NULL,
                    record_json TEXT NOT NULL
                )
                """
            )
            await conn.execute(
                """
                CREATE TABLE IF NOT EXISTS weddings (
                    position INTEGER PRIMARY KEY,
                    wedding_name TEXT UNIQUE NOT NULL,
                    record_json TEXT NOT NULL
                )
                """
            )
            await conn.commit()
            self._schema_initialized = True
        finally:
            await self._return_connection(conn)

    async def read(self) -> AddressBook | None:
        """Load the address book, or None if the database does not exist yet.

        Raises:
            DataLoadingError: If the file is not a usable SQLite database or
                holds invalid records.
        """
        if not self.db_path.exists():
            logger.info(f"Database {self.db_path} not found")
            return None

        try:
            await self._init_schema()

            conn = await self._get_connection()
            try:
                cursor = await conn.execute(
                    "SELECT record_json FROM persons ORDER BY position"
                )
                person_rows = await cursor.fetchall()
                cursor = await conn.execute(
                    "SELECT record_json FROM weddings ORDER BY position"
                )
                wedding_rows = await cursor.fetchall()
            finally:
                await self._return_connection(conn)
        except aiosqlite.Error as e:
            logger.error(f"Failed to read database {self.db_path}: {e}")
            raise DataLoadingError(f"Unreadable database {self.db_path}: {e}") from e

        return self._rows_to_address_book(person_rows, wedding_rows)

    async def save(self, address_book: AddressBook) -> None:
        """Replace every stored record with the contents of ``address_book``."""
        await self._init_schema()

        serializable = JsonSerializableAddressBook.from_model(address_book)
        conn = await self._get_connection()
        try:
            await conn.execute("DELETE FROM persons")
            await conn.execute("DELETE FROM weddings")
            await conn.executemany(
                "INSERT INTO persons (position, name, record_json) VALUES (?, ?, ?)",
                [
                    (position, person.name, person.model_dump_json())
                    for position, person in enumerate(serializable.persons)
                ],
            )
            await conn.executemany(
                "INSERT INTO weddings (position, wedding_name, record_json) VALUES (?, ?, ?)",
                [
                    (position, wedding.wedding_name, wedding.model_dump_json(by_alias=True))
                    for position, wedding in enumerate(serializable.weddings)
                ],
            )
            await conn.commit()
        except Exception:
            await conn.rollback()
            raise
        finally:
            await self._return_connection(conn)

    def _rows_to_address_book(
        self,
        person_rows: list[tuple[Any, ...]],
        wedding_rows: list[tuple[Any, ...]],
    ) -> AddressBook:
        """Convert database rows to an AddressBook.

        Raises:
            DataLoadingError: If any row is malformed or holds invalid data.
        """
        try:
            serializable = JsonSerializableAddressBook(
                persons=[JsonAdaptedPerson.model_validate_json(row[0]) for row in person_rows],
                weddings=[JsonAdaptedWedding.model_validate_json(row[0]) for row in wedding_rows],
            )
            return serializable.to_model_type()
        except ValidationError as e:
            logger.error(f"Failed to parse database row: {e}")
            raise DataLoadingError(f"Row parsing failed: {e}") from e
        except IllegalValueError as e:
            logger.error(f"Illegal values found in {self.db_path}: {e}")
            raise DataLoadingError(str(e)) from e
