"""
Statements module exceptions.

Both errors abort statement generation; no partial statement is produced.
"""

from shared.exceptions import EncoreError, NotFoundError, ValidationError


class StatementError(EncoreError):
    """Base exception for statement-related errors."""

    code = "STATEMENT_ERROR"


class UnknownPlayError(StatementError, NotFoundError):
    """Raised when a performance references a play missing from the catalog."""

    code = "UNKNOWN_PLAY"

    def __init__(self, play_id: str):
        super().__init__(f"Unknown play: {play_id}", details={"play_id": play_id})


class UnknownPlayTypeError(StatementError, ValidationError):
    """Raised when a play's genre has no pricing rule."""

    code = "UNKNOWN_PLAY_TYPE"

    def __init__(self, play_type: str):
        super().__init__(
            f"Unknown play type: {play_type}",
            details={"play_type": play_type},
        )
