"""
utils/errors.py
---------------
Error types shared by the data layer and the services.

    ValidationError       -> bad input, carries {field: message}
    StoreError            -> any database failure
    UniqueViolationError  -> a UNIQUE constraint rejected the write
"""

from typing import Optional


class ValidationError(Exception):
    """
    Raised when one or more fields of an entity are invalid.

    Attributes:
        fields: Mapping of field name to a human-readable message.
    """

    def __init__(self, fields: dict[str, str]):
        self.fields = dict(fields)
        super().__init__("; ".join(f"{k}: {v}" for k, v in self.fields.items()))


class StoreError(Exception):
    """
    Raised when the database fails to execute a statement.

    Attributes:
        cause: The underlying driver exception, if any.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)


class UniqueViolationError(StoreError):
    """Raised when a write breaks a UNIQUE constraint (SQLSTATE 23505)."""
