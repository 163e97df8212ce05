"""
Statements module data models.

These models define the invoice input, the play catalog entries and the
summary produced while a statement is being assembled. All of them are
immutable once constructed.
"""

from enum import Enum
from typing import Mapping

from pydantic import BaseModel, Field


class Genre(str, Enum):
    """Play genres with known pricing rules."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"


class Play(BaseModel):
    """
    A play in the catalog.

    The genre is kept as a plain string so a catalog may describe plays
    whose genre has no pricing rule; pricing rejects those at use time.
    """

    name: str = Field(..., description="Display name")
    type: str = Field(..., description="Genre identifier (e.g., 'tragedy')")

    model_config = {"frozen": True}


# Catalog of plays keyed by play ID
PlayCatalog = Mapping[str, Play]


class Performance(BaseModel):
    """A single performance ordered on an invoice."""

    play_id: str = Field(..., alias="playID", description="Catalog key of the play")
    audience: int = Field(..., ge=0, description="Number of seats")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }


class Invoice(BaseModel):
    """
    A customer's order of performances.

    Accepts the external shape directly:
    {"customer": "BigCo", "performances": [{"playID": "hamlet", "audience": 55}]}
    """

    customer: str = Field(..., description="Customer display name")
    performances: tuple[Performance, ...] = Field(
        default=(),
        description="Performances in order",
    )

    model_config = {"frozen": True}


class OrderLine(BaseModel):
    """One rendered line of a statement."""

    play_name: str = Field(..., description="Play display name")
    amount: int = Field(..., description="Amount owed in cents")
    audience: int = Field(..., description="Number of seats")

    model_config = {"frozen": True}


class StatementSummary(BaseModel):
    """
    Aggregated totals and lines for a statement.

    Lines are keyed by play name: a later performance of a play with the
    same name replaces the earlier line but keeps its position, while the
    totals include every performance.
    """

    total_amount: int = Field(default=0, description="Total owed in cents")
    volume_credits: int = Field(default=0, description="Total volume credits")
    lines: tuple[OrderLine, ...] = Field(
        default=(),
        description="Lines in first-seen order of play name",
    )

    model_config = {"frozen": True}
