"""
Pytest fixtures for statements module tests.

Provides a small play catalog and invoices built against it.
"""

import pytest

from modules.statements.models import Invoice, Performance, Play


@pytest.fixture
def plays():
    """Play catalog covering both priced genres."""
    return {
        "hamlet": Play(name="Hamlet", type="tragedy"),
        "as-like": Play(name="As You Like It", type="comedy"),
        "othello": Play(name="Othello", type="tragedy"),
    }


@pytest.fixture
def raw_plays():
    """The same catalog in its external dict form."""
    return {
        "hamlet": {"name": "Hamlet", "type": "tragedy"},
        "as-like": {"name": "As You Like It", "type": "comedy"},
        "othello": {"name": "Othello", "type": "tragedy"},
    }


@pytest.fixture
def invoice():
    """Invoice touching every play in the catalog."""
    return Invoice(
        customer="BigCo",
        performances=(
            Performance(play_id="hamlet", audience=55),
            Performance(play_id="as-like", audience=35),
            Performance(play_id="othello", audience=40),
        ),
    )


@pytest.fixture
def raw_invoice():
    """The same invoice in its external dict form."""
    return {
        "customer": "BigCo",
        "performances": [
            {"playID": "hamlet", "audience": 55},
            {"playID": "as-like", "audience": 35},
            {"playID": "othello", "audience": 40},
        ],
    }


@pytest.fixture
def statement_service():
    """Create a fresh statement service."""
    from modules.statements.service import StatementService
    return StatementService()
