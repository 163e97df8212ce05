"""
Base exception classes for the Encore backend.

Every error carries a stable ``code`` and the offending input values in
``details`` so callers can report a failed statement without parsing
the message.
"""

from typing import Any, Optional


class EncoreError(Exception):
    """Base exception for all Encore errors."""

    code = "ENCORE_ERROR"

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
        code: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})
        if code:
            self.code = code

    def to_dict(self) -> dict[str, Any]:
        """Error report with code, message and a copy of the details."""
        return {
            "error": self.code,
            "message": self.message,
            "details": dict(self.details),
        }


class NotFoundError(EncoreError):
    """A referenced input record does not exist."""

    code = "NOT_FOUND"


class ValidationError(EncoreError):
    """An input value is not acceptable."""

    code = "VALIDATION_ERROR"
