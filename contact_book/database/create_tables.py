"""
File: database/create_tables.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import logging
from pathlib import Path

import aiosqlite

log = logging.getLogger(__name__)


async def init_local_database(db_path: Path) -> None:
    """Create the contacts table in the SQLite file at `db_path` if it is missing."""
    db_path.parent.mkdir(parents=True, exist_ok=True)

    async with aiosqlite.connect(db_path) as conn:
        await conn.execute("""
            CREATE TABLE IF NOT EXISTS contacts (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                phone TEXT NOT NULL,
                email TEXT NOT NULL
            )
        """)
        await conn.commit()
        log.info(f"Local database initialized at {db_path}")
