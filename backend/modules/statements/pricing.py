"""
Pricing and volume credit rules for performances.

Amounts are integers in cents. Both functions are pure.
"""

from .models import Genre
from .exceptions import UnknownPlayTypeError


TRAGEDY_BASE = 40000
TRAGEDY_AUDIENCE_THRESHOLD = 30
TRAGEDY_PER_EXTRA_SEAT = 1000

COMEDY_BASE = 30000
COMEDY_PER_SEAT = 300
COMEDY_AUDIENCE_THRESHOLD = 20
COMEDY_LARGE_AUDIENCE_BONUS = 10000
COMEDY_PER_EXTRA_SEAT = 500

CREDIT_AUDIENCE_THRESHOLD = 30
COMEDY_CREDIT_DIVISOR = 5


def _parse_genre(play_type: str) -> Genre:
    try:
        return Genre(play_type)
    except ValueError:
        raise UnknownPlayTypeError(play_type) from None


def amount_owed(play_type: str, audience: int) -> int:
    """
    Calculate the amount owed for one performance, in cents.

    Args:
        play_type: Genre of the play (e.g., "tragedy")
        audience: Number of seats

    Returns:
        Amount in cents

    Raises:
        UnknownPlayTypeError: If the genre has no pricing rule
    """
    genre = _parse_genre(play_type)

    if genre is Genre.TRAGEDY:
        amount = TRAGEDY_BASE
        if audience > TRAGEDY_AUDIENCE_THRESHOLD:
            amount += TRAGEDY_PER_EXTRA_SEAT * (audience - TRAGEDY_AUDIENCE_THRESHOLD)
        return amount

    if genre is Genre.COMEDY:
        amount = COMEDY_BASE + COMEDY_PER_SEAT * audience
        if audience > COMEDY_AUDIENCE_THRESHOLD:
            amount += COMEDY_LARGE_AUDIENCE_BONUS + COMEDY_PER_EXTRA_SEAT * (
                audience - COMEDY_AUDIENCE_THRESHOLD
            )
        return amount

    raise UnknownPlayTypeError(play_type)


def volume_credits(play_type: str, audience: int) -> int:
    """
    Calculate volume credits earned by one performance.

    Unknown genres are not rejected here; they earn the base credits.
    """
    credits = max(audience - CREDIT_AUDIENCE_THRESHOLD, 0)

    # Extra credit for every five comedy attendees
    if play_type == Genre.COMEDY.value:
        credits += audience // COMEDY_CREDIT_DIVISOR

    return credits
