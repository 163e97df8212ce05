"""Tests for statements module models."""

import pytest
from pydantic import ValidationError

from modules.statements.models import (
    Genre,
    Invoice,
    OrderLine,
    Performance,
    Play,
    StatementSummary,
)


class TestGenre:
    def test_values(self):
        """Genres should use the catalog identifiers."""
        assert Genre.TRAGEDY.value == "tragedy"
        assert Genre.COMEDY.value == "comedy"

    def test_unknown_value(self):
        with pytest.raises(ValueError):
            Genre("history")


class TestPerformance:
    def test_accepts_external_alias(self):
        """Should read the playID key from raw input."""
        performance = Performance.model_validate({"playID": "hamlet", "audience": 55})
        assert performance.play_id == "hamlet"
        assert performance.audience == 55

    def test_accepts_field_name(self):
        """Should also accept the Python field name."""
        performance = Performance(play_id="hamlet", audience=55)
        assert performance.play_id == "hamlet"

    def test_rejects_negative_audience(self):
        with pytest.raises(ValidationError):
            Performance(play_id="hamlet", audience=-1)

    def test_frozen(self):
        """Performances are immutable."""
        performance = Performance(play_id="hamlet", audience=55)
        with pytest.raises(ValidationError):
            performance.audience = 10


class TestInvoice:
    def test_from_raw(self):
        """Should build from the external dict shape."""
        invoice = Invoice.model_validate({
            "customer": "BigCo",
            "performances": [
                {"playID": "hamlet", "audience": 55},
                {"playID": "othello", "audience": 40},
            ],
        })
        assert invoice.customer == "BigCo"
        assert [p.play_id for p in invoice.performances] == ["hamlet", "othello"]

    def test_defaults_to_no_performances(self):
        assert Invoice(customer="BigCo").performances == ()

    def test_requires_customer(self):
        with pytest.raises(ValidationError):
            Invoice.model_validate({"performances": []})


class TestPlay:
    def test_keeps_unknown_genre(self):
        """Catalog entries may carry genres without pricing rules."""
        play = Play(name="Henry V", type="history")
        assert play.type == "history"

    def test_frozen(self):
        play = Play(name="Hamlet", type="tragedy")
        with pytest.raises(ValidationError):
            play.name = "Macbeth"


class TestStatementSummary:
    def test_defaults(self):
        """Should default to zero totals and no lines."""
        summary = StatementSummary()
        assert summary.total_amount == 0
        assert summary.volume_credits == 0
        assert summary.lines == ()

    def test_lines(self):
        line = OrderLine(play_name="Hamlet", amount=40000, audience=25)
        summary = StatementSummary(total_amount=40000, lines=[line])
        assert summary.lines == (line,)
