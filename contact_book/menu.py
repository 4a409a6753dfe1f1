"""
Interactive contact book menu.

Reads a numeric choice per iteration and runs the matching operation against
a StorageManager. Storage failures are reported and the loop keeps going.

File: menu.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import logging
import re
from typing import Optional, TextIO

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich import box

from .database import (
    StorageError,
    StorageManager,
    all_contacts,
    contacts_matching,
    delete_contacts_named,
)
from .models import Contact

log = logging.getLogger(__name__)

# Menu option definitions
OPTIONS = {
    1: "Add Contact",
    2: "View Contacts",
    3: "Search Contact",
    4: "Delete Contact",
    5: "Exit",
}

EXIT_CHOICE = 5

# ASCII decimal digits only, so "1_0" and "５" are rejected
CHOICE_PATTERN = re.compile(r"[+-]?[0-9]+")


class CommandLoop:
    """
    Menu-driven driver for the contact book.

    Args:
        storage: Storage handle shared by every operation
        console: Rich console used for all output
        stream: Input stream. Defaults to stdin.
    """

    def __init__(
        self,
        storage: StorageManager,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
    ):
        self.storage = storage
        self.console = console or Console()
        self.stream = stream
        self.handlers = {
            1: self.add_contact,
            2: self.view_contacts,
            3: self.search_contact,
            4: self.delete_contact,
        }

    def _read_line(self, prompt: str) -> str:
        """Read one line without its terminator. Raises EOFError when input runs out."""
        if self.stream is None:
            return self.console.input(prompt)

        line = self.console.input(prompt, stream=self.stream)
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def show_menu(self) -> None:
        """Display the main menu."""
        self.console.print()
        self.console.print(Panel.fit("[bold cyan]Contact Book[/]", border_style="cyan"))

        table = Table(box=box.ROUNDED, show_header=False)
        table.add_column("Option", style="cyan", width=3)
        table.add_column("Name", style="white")

        for key, name in OPTIONS.items():
            table.add_row(str(key), name)

        self.console.print(table)

    def read_choice(self) -> Optional[int]:
        """Prompt for a menu choice. Returns None for anything that is not a menu number."""
        raw = self._read_line("Choose: ").strip()
        if not CHOICE_PATTERN.fullmatch(raw):
            log.debug(f"Discarded non-numeric menu input: {raw!r}")
            return None

        choice = int(raw)
        if choice not in OPTIONS:
            return None
        return choice

    async def run(self) -> None:
        """Main loop: prompt, dispatch, repeat until Exit or end of input."""
        while True:
            self.show_menu()

            try:
                choice = self.read_choice()
                if choice is None:
                    self.console.print("[yellow]Invalid[/]")
                    continue
                if choice == EXIT_CHOICE:
                    break

                await self.handlers[choice]()
            except UnicodeDecodeError as e:
                log.warning(f"Discarded undecodable input: {e}")
                self.console.print("[yellow]Invalid[/]")
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                break

        self.console.print("[dim]Bye![/]")

    async def add_contact(self) -> None:
        name = self._read_line("Enter Name: ")
        phone = self._read_line("Enter Phone: ")
        email = self._read_line("Enter Email: ")

        try:
            await Contact(name=name, phone=phone, email=email).save(self.storage)
        except StorageError as e:
            log.error(f"Error saving contact {name!r}: {e}")
            self.console.print(f"[red]Error saving contact: {escape(str(e))}[/]")
            return

        log.info(f"Saved contact {name!r}")
        self.console.print("[green]Contact saved successfully![/]")

    async def view_contacts(self) -> None:
        try:
            async with all_contacts(self.storage) as rows:
                found = await self._print_rows(rows)
        except StorageError as e:
            log.error(f"Error getting contacts: {e}")
            self.console.print(f"[red]Error getting contacts: {escape(str(e))}[/]")
            return

        if not found:
            self.console.print("No contacts found.")

    async def search_contact(self) -> None:
        term = self._read_line("Enter Name to Search: ")

        try:
            async with contacts_matching(self.storage, term) as rows:
                found = await self._print_rows(rows)
        except StorageError as e:
            log.error(f"Error searching contacts for {term!r}: {e}")
            self.console.print(f"[red]Error searching contacts: {escape(str(e))}[/]")
            return

        log.info(f"Search for {term!r} matched {found} contacts")
        if not found:
            self.console.print(f"No contacts found for: {escape(term)}")

    async def delete_contact(self) -> None:
        name = self._read_line("Enter Name to Delete: ")

        try:
            deleted = await delete_contacts_named(self.storage, name)
        except StorageError as e:
            log.error(f"Error deleting contact {name!r}: {e}")
            self.console.print(f"[red]Error deleting contact: {escape(str(e))}[/]")
            return

        # Row count is logged only; the user always sees the same confirmation
        log.info(f"Delete for {name!r} removed {deleted} rows")
        self.console.print("Contact deleted (if it existed).")

    async def _print_rows(self, rows) -> int:
        """Print one line per row. Returns how many rows were printed."""
        count = 0
        async for row in rows:
            contact = Contact.from_db_row(row)
            self.console.print(escape(contact.display_line()), highlight=False)
            count += 1
        return count
