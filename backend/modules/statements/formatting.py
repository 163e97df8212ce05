"""Plain-text rendering of customer statements."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from .models import StatementSummary


CURRENCY_SYMBOL = "$"
CENTS_PER_DOLLAR = 100


def format_currency(value: Union[Decimal, float, int]) -> str:
    """Format a dollar value as US currency text, e.g. 1234.5 -> "$1,234.50"."""
    raw = Decimal(str(value))
    amount = raw.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    # Sign comes from the unrounded value, so -0.004 renders as -$0.00
    sign = "-" if raw.is_signed() else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(amount):,.2f}"


def _to_dollars(cents: int) -> Decimal:
    return Decimal(cents) / CENTS_PER_DOLLAR


def render_statement(customer: str, summary: StatementSummary) -> str:
    """
    Render a statement as newline-separated text without a trailing newline.

    Args:
        customer: Customer display name
        summary: Aggregated statement totals and lines

    Returns:
        Statement text
    """
    parts = [f"Statement for {customer}"]

    for line in summary.lines:
        parts.append(
            f"    {line.play_name}: {format_currency(_to_dollars(line.amount))} "
            f"({line.audience} seats)"
        )

    parts.append(f"  Amount owed is {format_currency(_to_dollars(summary.total_amount))}")
    parts.append(f"  You earned {summary.volume_credits} credits")
    return "\n".join(parts)
