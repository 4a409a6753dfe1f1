"""
Common database errors

File: database/common.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""


class StorageError(Exception):
    """A database operation failed. The message is the engine's own."""


__all__ = [
    "StorageError",
]
