"""Shared pytest fixtures."""
from __future__ import annotations

import asyncio
import io
import logging
from pathlib import Path

import pytest
from rich.console import Console

from contact_book import CommandLoop, StorageManager


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "contacts.db"


@pytest.fixture
def storage(db_path: Path) -> StorageManager:
    """A fresh, initialized manager backed by a temporary file."""
    manager = StorageManager(db_path)
    asyncio.run(manager.initialize())
    return manager


@pytest.fixture
def run_session():
    """Drive a CommandLoop with scripted input lines and return everything it printed."""

    def _run(storage: StorageManager, *lines: str) -> str:
        out = io.StringIO()
        console = Console(file=out, width=200, force_terminal=False, color_system=None)
        stream = io.StringIO("".join(f"{line}\n" for line in lines))
        asyncio.run(CommandLoop(storage, console=console, stream=stream).run())
        return out.getvalue()

    return _run


@pytest.fixture
def restore_root_logging():
    """Drop handlers a test installs on the root logger and restore its level."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in saved_handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(saved_level)
