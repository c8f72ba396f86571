"""
Presentation helpers for the stake calculator.

Turns a ``StakeResult`` into the strings the form shows.  Kept free of any
Streamlit import so the display contract can be unit-tested:

    * A stake is only shown when the bet has a positive edge; otherwise the
      card reads ``$0.00`` whatever the (already clamped) raw value is.
    * Currency is US dollars with thousands separators and two decimals.
"""

import math
from dataclasses import dataclass
from typing import Optional

from stakecalc.core.kelly import fractional_kelly, kelly_to_pct_of_bankroll
from stakecalc.core.odds_math import (
    InvalidOddsError,
    OddsFormat,
    american_to_decimal,
    decimal_to_american,
)
from stakecalc.services.calculator import StakeResult, parse_number

ZERO_STAKE = "$0.00"
NO_VALUE = "—"

ODDS_HINT_EMPTY = "Enter odds to calculate implied probability."
FULL_KELLY_NO_EDGE = "No positive EV found."
HALF_KELLY_NO_EDGE = "Conservative staking (recommended)."
NEGATIVE_EV_WARNING = "Warning: The expected value is negative. Kelly suggests a $0 bet."


@dataclass(frozen=True)
class StakeView:
    """Everything the results panel renders, already formatted."""

    error_message: Optional[str]
    odds_hint: str
    edge_text: str
    full_stake_text: str
    full_stake_caption: str
    half_stake_text: str
    half_stake_caption: str
    is_positive_edge: bool
    warning: Optional[str]


def format_currency(value: float) -> str:
    """``1234.5`` → ``"$1,234.50"``."""
    if value < 0:
        return f"-${-value:,.2f}"
    return f"${value:,.2f}"


def format_edge(edge_pct: Optional[float]) -> str:
    """Signed edge in percent, e.g. ``"+21.67%"``; ``"—"`` when unknown."""
    if edge_pct is None:
        return NO_VALUE
    sign = "+" if edge_pct > 0 else ""
    return f"{sign}{edge_pct:.2f}%"


def odds_hint(result: StakeResult) -> str:
    """Line shown under the odds field."""
    if result.implied_probability_pct is None:
        return ODDS_HINT_EMPTY
    return (
        f"Implied: {result.implied_probability_pct:.1f}% | "
        f"Net Odds (b): {result.net_odds:.2f}"
    )


def displayed_full_stake(result: StakeResult) -> float:
    """Full Kelly stake as displayed: zero unless the edge is positive."""
    return result.full_stake if result.is_positive_edge else 0.0


def displayed_half_stake(result: StakeResult) -> float:
    """Half Kelly stake as displayed: zero unless the edge is positive."""
    return result.half_stake if result.is_positive_edge else 0.0


def equivalent_odds(odds, odds_format) -> Optional[str]:
    """The same price quoted in the other format, or ``None`` if unparseable.

    ``+200`` (American) → ``"3.00 decimal"``; ``1.5`` (decimal) → ``"-200 American"``.
    """
    value = parse_number(odds)
    if value is None:
        return None
    try:
        fmt = OddsFormat(odds_format)
    except ValueError:
        return None

    if fmt is OddsFormat.AMERICAN:
        decimal_odds = american_to_decimal(value)
        if not math.isfinite(decimal_odds):
            return None
        return f"{decimal_odds:.2f} decimal"
    try:
        return f"{decimal_to_american(value):+d} American"
    except (InvalidOddsError, OverflowError):
        return None


def build_view(result: StakeResult) -> StakeView:
    """Format ``result`` for the results panel."""
    if not result.ok:
        return StakeView(
            error_message=result.error_detail,
            odds_hint=ODDS_HINT_EMPTY,
            edge_text=NO_VALUE,
            full_stake_text=ZERO_STAKE,
            full_stake_caption=FULL_KELLY_NO_EDGE,
            half_stake_text=ZERO_STAKE,
            half_stake_caption=HALF_KELLY_NO_EDGE,
            is_positive_edge=False,
            warning=None,
        )

    if result.is_positive_edge:
        full_pct = kelly_to_pct_of_bankroll(result.kelly_fraction)
        half_pct = kelly_to_pct_of_bankroll(fractional_kelly(result.kelly_fraction))
        full_caption = f"{full_pct:.2f}% of bankroll"
        half_caption = f"{half_pct:.2f}% of bankroll"
        warning = None
    else:
        full_caption = FULL_KELLY_NO_EDGE
        half_caption = HALF_KELLY_NO_EDGE
        warning = NEGATIVE_EV_WARNING

    return StakeView(
        error_message=None,
        odds_hint=odds_hint(result),
        edge_text=format_edge(result.edge_pct),
        full_stake_text=format_currency(displayed_full_stake(result)),
        full_stake_caption=full_caption,
        half_stake_text=format_currency(displayed_half_stake(result)),
        half_stake_caption=half_caption,
        is_positive_edge=result.is_positive_edge,
        warning=warning,
    )
