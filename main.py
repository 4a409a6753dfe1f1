"""
Main entry point for Contact Book.

Interactive menu for adding, viewing, searching and deleting contacts.

File: main.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import asyncio
import logging

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from contact_book import CommandLoop, Settings, StorageError, StorageManager, configure_logging

console = Console()

load_dotenv()

log = logging.getLogger(__name__)


async def main():
    """Main entry point with interactive menu."""
    settings = Settings.from_env()
    configure_logging(settings)

    storage = StorageManager(settings.db_path)
    try:
        await storage.initialize()
    except StorageError as e:
        # Keep going; every operation retries initialization and reports its own failure
        console.print(f"[red]Database error: {escape(str(e))}[/]")

    await CommandLoop(storage, console=console).run()


def run():
    asyncio.run(main())


if __name__ == "__main__":
    run()
