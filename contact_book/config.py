"""
Runtime configuration for Contact Book.

Values come from the environment (a local `.env` is loaded by `main.py`).

File: config.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

from dataclasses import dataclass, field
from datetime import datetime
import logging
import os
from pathlib import Path

DEFAULT_DB_PATH = Path("contacts.db")
DEFAULT_LOG_DIR = Path("logs")


@dataclass
class Settings:
    """Paths and log level for a Contact Book session."""

    db_path: Path = field(default_factory=lambda: DEFAULT_DB_PATH)
    log_dir: Path = field(default_factory=lambda: DEFAULT_LOG_DIR)
    log_level: str = "INFO"

    def __post_init__(self):
        # Ensure paths are Path objects
        if isinstance(self.db_path, str):
            self.db_path = Path(self.db_path)
        if isinstance(self.log_dir, str):
            self.log_dir = Path(self.log_dir)
        self.log_level = self.log_level.upper()

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from CONTACT_BOOK_* environment variables."""
        return cls(
            db_path=os.getenv("CONTACT_BOOK_DB") or DEFAULT_DB_PATH,
            log_dir=os.getenv("CONTACT_BOOK_LOG_DIR") or DEFAULT_LOG_DIR,
            log_level=os.getenv("CONTACT_BOOK_LOG_LEVEL") or "INFO",
        )

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"contact_book_{datetime.now().strftime('%Y-%m-%d')}.log"


def configure_logging(settings: Settings) -> None:
    """
    Send log records to a dated file under `settings.log_dir`.

    Stdout carries the menu, so nothing is logged to a stream handler.
    """
    settings.log_dir.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format='%(asctime)s | %(levelname)-8s | %(message)s',
        handlers=[
            logging.FileHandler(settings.log_file),
        ],
        force=True,
    )
