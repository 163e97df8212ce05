"""
Statements module interface.

Callers should depend on IStatementService, not the concrete implementation.
"""

from typing import Any, Mapping, Protocol, Union, runtime_checkable

from .models import Invoice, Play, StatementSummary


@runtime_checkable
class IStatementService(Protocol):
    """
    Interface for generating customer statements.

    This protocol defines the contract that the statements module exposes.
    """

    def build_summary(
        self,
        invoice: Union[Invoice, Mapping[str, Any]],
        plays: Mapping[str, Union[Play, Mapping[str, Any]]],
    ) -> StatementSummary:
        """
        Aggregate an invoice into totals and statement lines.

        Args:
            invoice: Invoice model or its raw dict form
            plays: Catalog of plays keyed by play ID

        Returns:
            StatementSummary with totals in cents and volume credits

        Raises:
            UnknownPlayError: If a performance references a missing play
            UnknownPlayTypeError: If a play's genre has no pricing rule
        """
        ...

    def create_statement(
        self,
        invoice: Union[Invoice, Mapping[str, Any]],
        plays: Mapping[str, Union[Play, Mapping[str, Any]]],
    ) -> str:
        """
        Generate the formatted statement text for an invoice.

        Args:
            invoice: Invoice model or its raw dict form
            plays: Catalog of plays keyed by play ID

        Returns:
            Statement text, lines separated by a newline

        Raises:
            UnknownPlayError: If a performance references a missing play
            UnknownPlayTypeError: If a play's genre has no pricing rule
        """
        ...
