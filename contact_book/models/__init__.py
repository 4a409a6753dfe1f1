"""
Data models for Contact Book.
"""

from .contact import Contact

__all__ = [
    "Contact",
]
