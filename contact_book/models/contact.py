"""
File: models/contact.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, ConfigDict

from ..database import StorageManager, insert_contact


class Contact(BaseModel):
    """A single contact book entry."""
    model_config = ConfigDict(validate_assignment=True, extra='ignore')

    id: Optional[int] = Field(None, description="Assigned by SQLite on insert, never reused")
    name: str = Field(..., description="Contact name, stored verbatim")
    phone: str = Field(..., description="Phone number, not validated")
    email: str = Field(..., description="Email address, not validated")

    @classmethod
    def from_db_row(cls, row: Mapping[str, Any]) -> "Contact":
        """Create a Contact from a row that exposes columns by name"""
        keys = row.keys()
        return cls(
            id=row["id"] if "id" in keys else None,
            name=row["name"],
            phone=row["phone"],
            email=row["email"],
        )

    def display_line(self) -> str:
        return f"Name: {self.name}, Phone: {self.phone}, Email: {self.email}"

    async def save(self, storage: StorageManager) -> None:
        """
        Insert this contact.

        Args:
            storage: StorageManager to write through

        Raises:
            StorageError: if the insert fails
        """
        await insert_contact(storage, self.name, self.phone, self.email)
