"""
models/facility.py
------------------
Domain model for facilities (halls, fields, rinks).
Only read here: sports look up the facilities that reference them.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Facility:
    """
    Represents a venue the club can book.

    Attributes:
        id: Database primary key.
        name: Display name.
        sport_id: The sport this facility is dedicated to, if any.
    """
    name: str
    id: Optional[int] = None
    sport_id: Optional[int] = None

    def __str__(self) -> str:
        return f"#{self.id} {self.name}"
