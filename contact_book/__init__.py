"""
Contact Book: a text-menu contact manager backed by a local SQLite file.
"""

from .config import Settings, configure_logging
from .database import StorageError, StorageManager
from .menu import CommandLoop
from .models import Contact

__all__ = [
    "CommandLoop",
    "Contact",
    "Settings",
    "StorageError",
    "StorageManager",
    "configure_logging",
]
