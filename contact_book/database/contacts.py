"""
Statements behind the contact book operations.

File: database/contacts.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

from typing import AsyncContextManager

import aiosqlite

from .manager import StorageManager

INSERT_CONTACT = "INSERT INTO contacts (name, phone, email) VALUES (?, ?, ?)"
SELECT_ALL = "SELECT id, name, phone, email FROM contacts ORDER BY id"
# The term is bound as-is, so `%` and `_` inside it still act as LIKE wildcards
SELECT_BY_NAME_LIKE = "SELECT id, name, phone, email FROM contacts WHERE name LIKE ? ORDER BY id"
DELETE_BY_NAME = "DELETE FROM contacts WHERE name = ?"


async def insert_contact(storage: StorageManager, name: str, phone: str, email: str) -> int:
    """Insert one contact row. Returns the number of rows written."""
    return await storage.execute_update(INSERT_CONTACT, name, phone, email)


def all_contacts(storage: StorageManager) -> AsyncContextManager[aiosqlite.Cursor]:
    """Every stored contact, in insertion order."""
    return storage.execute_query(SELECT_ALL)


def contacts_matching(storage: StorageManager, term: str) -> AsyncContextManager[aiosqlite.Cursor]:
    """
    Contacts whose name contains `term`.

    Uses SQLite's LIKE, which ignores ASCII case. An empty term matches all.
    """
    return storage.execute_query(SELECT_BY_NAME_LIKE, f"%{term}%")


async def delete_contacts_named(storage: StorageManager, name: str) -> int:
    """Delete every contact whose name equals `name` exactly. Returns rows removed."""
    return await storage.execute_update(DELETE_BY_NAME, name)
