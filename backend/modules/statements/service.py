"""
Statement service implementation.

Resolves each performance against the play catalog, prices it, accrues
volume credits and renders the result.
"""

import logging
from typing import Any, Mapping, Optional, Union

from .interfaces import IStatementService
from .models import Invoice, OrderLine, Play, PlayCatalog, StatementSummary
from .exceptions import UnknownPlayError
from .formatting import render_statement
from .pricing import amount_owed, volume_credits

logger = logging.getLogger(__name__)


def _coerce_invoice(invoice: Union[Invoice, Mapping[str, Any]]) -> Invoice:
    if isinstance(invoice, Invoice):
        return invoice
    return Invoice.model_validate(invoice)


def _resolve_play(
    plays: Mapping[str, Union[Play, Mapping[str, Any]]],
    play_id: str,
) -> Play:
    # Only referenced entries are validated; unused catalog entries are ignored
    play = plays.get(play_id)
    if play is None:
        raise UnknownPlayError(play_id)
    if isinstance(play, Play):
        return play
    return Play.model_validate(play)


def build_summary(
    invoice: Invoice,
    plays: Union[PlayCatalog, Mapping[str, Mapping[str, Any]]],
) -> StatementSummary:
    """
    Fold an invoice's performances into a statement summary.

    Lines are keyed by play name, so a later performance of a play with the
    same name overwrites the earlier line in place. Totals include every
    performance.

    Raises:
        UnknownPlayError: If a performance references a missing play
        UnknownPlayTypeError: If a play's genre has no pricing rule
    """
    total_amount = 0
    total_credits = 0
    lines: dict[str, OrderLine] = {}

    for performance in invoice.performances:
        play = _resolve_play(plays, performance.play_id)

        amount = amount_owed(play.type, performance.audience)
        total_amount += amount
        total_credits += volume_credits(play.type, performance.audience)

        lines[play.name] = OrderLine(
            play_name=play.name,
            amount=amount,
            audience=performance.audience,
        )

    return StatementSummary(
        total_amount=total_amount,
        volume_credits=total_credits,
        lines=tuple(lines.values()),
    )


def create_statement(
    invoice: Union[Invoice, Mapping[str, Any]],
    plays: Mapping[str, Union[Play, Mapping[str, Any]]],
) -> str:
    """Generate the statement text for an invoice against a play catalog."""
    return get_statement_service().create_statement(invoice, plays)


class StatementService(IStatementService):
    """
    Statement generator.

    Stateless; one instance can serve any number of callers.
    """

    def build_summary(
        self,
        invoice: Union[Invoice, Mapping[str, Any]],
        plays: Mapping[str, Union[Play, Mapping[str, Any]]],
    ) -> StatementSummary:
        """Aggregate an invoice into totals and statement lines."""
        invoice = _coerce_invoice(invoice)
        summary = build_summary(invoice, plays)

        logger.debug(
            f"Built summary for {invoice.customer}: "
            f"{len(invoice.performances)} performances, "
            f"total={summary.total_amount} cents, credits={summary.volume_credits}"
        )
        return summary

    def create_statement(
        self,
        invoice: Union[Invoice, Mapping[str, Any]],
        plays: Mapping[str, Union[Play, Mapping[str, Any]]],
    ) -> str:
        """Generate the formatted statement text for an invoice."""
        invoice = _coerce_invoice(invoice)
        return render_statement(invoice.customer, self.build_summary(invoice, plays))


# Module-level instance getter
_statement_service: Optional[StatementService] = None


def get_statement_service() -> StatementService:
    """Get the statement service singleton."""
    global _statement_service
    if _statement_service is None:
        _statement_service = StatementService()
    return _statement_service


def reset_statement_service() -> None:
    """Reset the statement service singleton (for testing)."""
    global _statement_service
    _statement_service = None
