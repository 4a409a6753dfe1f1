"""
Storage manager for the contacts database.

Every call opens its own aiosqlite connection and closes it before returning,
so at most one connection is ever open.

File: database/manager.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

from contextlib import asynccontextmanager
import logging
from pathlib import Path
from typing import Any, AsyncIterator, Union

import aiosqlite

from .common import StorageError
from .create_tables import init_local_database

log = logging.getLogger(__name__)


class StorageManager:
    """
    Durable access to the contacts table.

    Construct one per process and hand it to whatever needs storage. The
    table is created lazily on first use and at most once per manager.

    Engine errors and values SQLite cannot encode both surface as StorageError.
    """

    def __init__(self, db_path: Union[str, Path]):
        self.db_path = Path(db_path)
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        """
        Ensure the contacts table exists.

        A no-op after the first success. A failed attempt raises StorageError
        and leaves the manager uninitialized, so the next call tries again.
        """
        if self._initialized:
            return

        try:
            await init_local_database(self.db_path)
        except (aiosqlite.Error, OSError) as e:
            log.error(f"Error initializing database at {self.db_path}: {e}")
            raise StorageError(str(e)) from e

        self._initialized = True

    async def execute_update(self, query: str, *params: Any) -> int:
        """
        Run a parameterized INSERT/UPDATE/DELETE and commit it.

        Args:
            query: Statement text with `?` placeholders
            *params: Values bound to the placeholders by position

        Returns:
            Number of rows affected
        """
        await self.initialize()

        try:
            async with aiosqlite.connect(self.db_path) as conn:
                async with conn.execute(query, params) as cursor:
                    rowcount = cursor.rowcount
                await conn.commit()
        except (aiosqlite.Error, UnicodeError) as e:
            log.error(f"Update failed ({query.split()[0]}): {e}")
            raise StorageError(str(e)) from e

        return rowcount

    @asynccontextmanager
    async def execute_query(self, query: str, *params: Any) -> AsyncIterator[aiosqlite.Cursor]:
        """
        Run a parameterized SELECT and yield its cursor.

        The cursor is a lazy, forward-only async iterator of `aiosqlite.Row`
        objects, so columns can be read by name. The connection is closed when
        the `async with` block exits.

        Usage:
            >>> async with storage.execute_query("SELECT name FROM contacts") as rows:
            ...     async for row in rows:
            ...         print(row["name"])
        """
        await self.initialize()

        try:
            async with aiosqlite.connect(self.db_path) as conn:
                conn.row_factory = aiosqlite.Row
                async with conn.execute(query, params) as cursor:
                    yield cursor
        except (aiosqlite.Error, UnicodeError) as e:
            log.error(f"Query failed: {e}")
            raise StorageError(str(e)) from e
