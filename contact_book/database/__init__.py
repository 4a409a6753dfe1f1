"""
File: database/__init__.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

from .common import StorageError
from .create_tables import init_local_database
from .manager import StorageManager
from .contacts import (
    insert_contact,
    all_contacts,
    contacts_matching,
    delete_contacts_named,
)

__all__ = [
    "StorageError",
    "StorageManager",
    "init_local_database",
    "insert_contact",
    "all_contacts",
    "contacts_matching",
    "delete_contacts_named",
]
