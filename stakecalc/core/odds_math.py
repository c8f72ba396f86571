"""Fundamental odds mathematics — the single source of truth.

Every function here is **pure**: no I/O, no logging, no side effects.
Import from this module; never reimplement conversions in the dashboard.

Two quotation formats are supported:

1. **American** — ``+200`` means win 200 on a 100 stake, ``-150`` means risk
   150 to win 100.  Zero is not a real quote; it is treated as even money.
2. **Decimal** — total payout per unit staked, stake included.  Must be
   strictly greater than 1.0 to describe a bet that can pay a profit.

Implied probabilities are returned as **percentages** (0–100) because that is
the unit the form collects the bettor's own estimate in; the edge is then a
plain difference of two percentages.

Run tests with::

    pytest tests/test_odds_math.py -v
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

# ---------------------------------------------------------------------------
# Module-level constants
# ---------------------------------------------------------------------------

#: Decimal odds at or below this value can never return a profit.
MIN_DECIMAL_ODDS: Final[float] = 1.0

#: Decimal price used for an American quote of exactly zero.
EVEN_MONEY_DECIMAL: Final[float] = 2.0

#: Implied probability (percent) used for an American quote of exactly zero.
EVEN_MONEY_IMPLIED_PCT: Final[float] = 50.0


class OddsFormat(str, Enum):
    """Quotation format selected on the form."""

    AMERICAN = "american"
    DECIMAL = "decimal"


class InvalidOddsError(ValueError):
    """Raised when an odds quotation cannot describe a winnable bet."""


@dataclass(frozen=True)
class NormalizedOdds:
    """An odds quotation reduced to the three numbers the Kelly math needs.

    Attributes:
        decimal_odds: Total payout per unit staked, stake included.
        implied_probability_pct: Break-even win probability, in percent.
        net_odds: Profit per unit staked on a win (``b = decimal − 1``).
    """

    decimal_odds: float
    implied_probability_pct: float
    net_odds: float


# ---------------------------------------------------------------------------
# American odds
# ---------------------------------------------------------------------------


def american_to_decimal(american: int | float) -> float:
    """Convert American odds to decimal (European) format.

    Examples::

        american_to_decimal(+200) → 3.0000
        american_to_decimal(-150) → 1.6667
        american_to_decimal(0)    → 2.0000   (treated as even money)

    Args:
        american: American odds.  Negative = favourite, positive = underdog.

    Returns:
        Decimal odds, always > 1.0 for finite input.
    """
    if american > 0:
        return american / 100.0 + 1.0
    if american < 0:
        # Negative: risk |american| to win 100
        return 100.0 / -american + 1.0
    return EVEN_MONEY_DECIMAL


def american_implied_pct(american: int | float) -> float:
    """Raw implied probability, in percent, from American odds.

    Examples::

        american_implied_pct(+200) → 33.33
        american_implied_pct(-150) → 60.00
        american_implied_pct(0)    → 50.00
    """
    if american > 0:
        return 100.0 / (american + 100.0) * 100.0
    if american < 0:
        return -american / (-american + 100.0) * 100.0
    return EVEN_MONEY_IMPLIED_PCT


# ---------------------------------------------------------------------------
# Decimal odds
# ---------------------------------------------------------------------------


def decimal_implied_pct(decimal_odds: float) -> float:
    """Raw implied probability, in percent, from decimal odds.

    Raises:
        InvalidOddsError: If ``decimal_odds <= 1.0``.
    """
    _require_winnable(decimal_odds)
    return 100.0 / decimal_odds


def decimal_to_american(decimal_odds: float) -> int:
    """Convert decimal odds to the nearest American integer.

    Inverse of :func:`american_to_decimal`.  Rounds to the nearest integer;
    use the result for display only, not for further arithmetic.

    Args:
        decimal_odds: Decimal odds > 1.0.

    Returns:
        American odds.  Values ≥ 2.0 are returned as positive (underdog);
        values < 2.0 are returned as negative (favourite).

    Raises:
        InvalidOddsError: If ``decimal_odds <= 1.0``.
    """
    _require_winnable(decimal_odds)
    if decimal_odds >= EVEN_MONEY_DECIMAL:
        return round((decimal_odds - 1.0) * 100)
    return round(-100.0 / (decimal_odds - 1.0))


# ---------------------------------------------------------------------------
# Normalisation
# ---------------------------------------------------------------------------


def normalize_odds(odds: float, odds_format: OddsFormat | str) -> NormalizedOdds:
    """Reduce a quotation in either format to :class:`NormalizedOdds`.

    Args:
        odds: The quoted price.
        odds_format: ``"american"`` or ``"decimal"`` (or the enum member).

    Returns:
        Decimal odds, implied probability (percent) and net odds ``b``.

    Raises:
        InvalidOddsError: If the format is unknown or decimal odds are
            not strictly greater than 1.0.
    """
    try:
        fmt = OddsFormat(odds_format)
    except ValueError:
        raise InvalidOddsError(f"Unsupported odds format {odds_format!r}.") from None

    if fmt is OddsFormat.AMERICAN:
        decimal_odds = american_to_decimal(odds)
        implied_pct = american_implied_pct(odds)
    else:
        implied_pct = decimal_implied_pct(odds)
        decimal_odds = float(odds)

    return NormalizedOdds(
        decimal_odds=decimal_odds,
        implied_probability_pct=implied_pct,
        net_odds=decimal_odds - 1.0,
    )


def _require_winnable(decimal_odds: float) -> None:
    if decimal_odds <= MIN_DECIMAL_ODDS:
        raise InvalidOddsError(
            f"Decimal odds {decimal_odds!r} must be greater than {MIN_DECIMAL_ODDS}."
        )
