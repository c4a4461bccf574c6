"""
models/sport.py
---------------
Domain model for the sports offered by the club.

A Sport is built one of two ways:
    Sport.from_untrusted_input(form)   -> must pass validate() before saving
    Sport.from_storage_record(row)     -> trusted, never validated
"""

import re
import unicodedata
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from utils.errors import ValidationError

# Letters (ASCII, Latin-1 and Latin Extended-A, so æ ø å é ü ł all pass),
# digits, space, apostrophe, comma, period and hyphen. 1-100 characters.
NAME_PATTERN = re.compile(r"[A-Za-z0-9À-ÖØ-öø-ſ '.,-]{1,100}")

INVALID_NAME = "Invalid sport name."


@dataclass
class Sport:
    """
    Represents one sport.

    Attributes:
        name: Display name, unique across all sports.
        id: Database primary key (None until the first insert).
    """
    name: Any
    id: Optional[int] = None
    _trusted_name: Any = field(default=None, init=False, repr=False, compare=False)
    _trusted: bool = field(default=False, init=False, repr=False, compare=False)
    _deleted: bool = field(default=False, init=False, repr=False, compare=False)

    # ── CONSTRUCTION ──────────────────────────────────────

    @classmethod
    def from_untrusted_input(cls, fields: Any) -> "Sport":
        """
        Build a new, unsaved Sport from user-supplied data (e.g. a form).

        Missing or malformed input never raises here; it simply fails
        validate() later.
        """
        name = fields.get("name") if isinstance(fields, Mapping) else None
        return cls(name=name)

    @classmethod
    def from_storage_record(cls, record: Mapping) -> "Sport":
        """Rebuild a Sport from a database row. The row is trusted as-is."""
        sport = cls(name=record["name"], id=record["id"])
        sport._trust_current_name()
        return sport

    # ── VALIDATION ────────────────────────────────────────

    def validate(self) -> None:
        """
        Check every field.

        Raises:
            ValidationError: With a {"name": ...} entry if the name is invalid.
        """
        errors: dict[str, str] = {}

        # Compare in NFC so "å" typed as "a" + combining ring counts as one letter.
        if not isinstance(self.name, str) or not NAME_PATTERN.fullmatch(
            unicodedata.normalize("NFC", self.name)
        ):
            errors["name"] = INVALID_NAME

        if errors:
            raise ValidationError(errors)
        self._trust_current_name()

    @property
    def needs_validation(self) -> bool:
        """True unless the current name came from the database or already passed validate()."""
        return not self._trusted or self.name != self._trusted_name

    def _trust_current_name(self) -> None:
        self._trusted = True
        self._trusted_name = self.name

    # ── STATE ─────────────────────────────────────────────

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    @property
    def is_deleted(self) -> bool:
        return self._deleted

    def mark_deleted(self) -> None:
        """Put the instance in its terminal state; it must not be saved again."""
        self._deleted = True

    def __str__(self) -> str:
        return f"#{self.id} {self.name}" if self.id is not None else f"(new) {self.name}"
