"""
Sample invoice and play catalog.

Used by run_statement.py as demo data.
"""

from .models import Invoice, Performance, Play


SAMPLE_PLAYS = {
    "hamlet": Play(name="Hamlet", type="tragedy"),
    "as-like": Play(name="As You Like It", type="comedy"),
    "othello": Play(name="Othello", type="tragedy"),
}


def sample_invoice(customer: str = "BigCo") -> Invoice:
    """Build the sample invoice for the given customer."""
    return Invoice(
        customer=customer,
        performances=(
            Performance(play_id="hamlet", audience=55),
            Performance(play_id="as-like", audience=35),
            Performance(play_id="othello", audience=40),
        ),
    )
