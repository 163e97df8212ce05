"""
Statements module.

Prices theatrical performances, accrues volume credits and renders the
customer statement.

Public API:
- IStatementService: Interface for statement generation
- Invoice, Performance, Play: Input models
- StatementSummary, OrderLine: Aggregated results
- create_statement: Render the statement text for an invoice
"""

from .interfaces import IStatementService
from .models import (
    Genre,
    Play,
    PlayCatalog,
    Performance,
    Invoice,
    OrderLine,
    StatementSummary,
)
from .exceptions import (
    StatementError,
    UnknownPlayError,
    UnknownPlayTypeError,
)
from .pricing import amount_owed, volume_credits
from .formatting import format_currency, render_statement
from .service import (
    StatementService,
    build_summary,
    create_statement,
    get_statement_service,
    reset_statement_service,
)

__all__ = [
    # Interface
    "IStatementService",
    # Models
    "Genre",
    "Play",
    "PlayCatalog",
    "Performance",
    "Invoice",
    "OrderLine",
    "StatementSummary",
    # Exceptions
    "StatementError",
    "UnknownPlayError",
    "UnknownPlayTypeError",
    # Rules
    "amount_owed",
    "volume_credits",
    # Formatting
    "format_currency",
    "render_statement",
    # Service
    "StatementService",
    "build_summary",
    "create_statement",
    "get_statement_service",
    "reset_statement_service",
]
