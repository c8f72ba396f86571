"""
Stake calculator: validates raw form input and produces a Kelly recommendation.

This is the only entry point the dashboard calls.  It is a pure, synchronous
function of its four inputs:

    1. Validation — probability, bankroll, odds, in that order.  The first
       failure wins and is returned as an ``ErrorKind`` value; nothing is
       raised for bad input.
    2. Normalisation — odds are reduced to decimal odds, implied probability
       and net odds via ``stakecalc.core.odds_math``.
    3. Kelly evaluation — full and half Kelly stakes and the edge over the
       market via ``stakecalc.core.kelly``.

Inputs are taken exactly as the form hands them over (numbers or raw text),
so an empty or half-typed field simply yields an error result.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from stakecalc.core.kelly import (
    HALF_KELLY_DIVISOR,
    kelly_fraction,
    stake_for,
)
from stakecalc.core.odds_math import (
    InvalidOddsError,
    NormalizedOdds,
    OddsFormat,
    normalize_odds,
)

logger = logging.getLogger(__name__)

RawNumber = Union[str, int, float, None]


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------

class ErrorKind(str, Enum):
    """Why an input set was rejected."""

    INVALID_PROBABILITY = "InvalidProbability"
    INVALID_BANKROLL = "InvalidBankroll"
    INVALID_ODDS = "InvalidOdds"


MSG_PROBABILITY = "Win probability must be between 0% and 100%."
MSG_BANKROLL = "Bankroll must be a positive number."
MSG_ODDS_NAN = "Odds must be a valid number."
MSG_ODDS_FORMAT = "Odds format must be American or Decimal."
MSG_DECIMAL_ODDS = "Decimal odds must be greater than 1.0."
MSG_NET_ODDS = "Net odds must be positive."
MSG_ODDS_RANGE = "Odds are out of range."


@dataclass(frozen=True)
class StakeInput:
    """One evaluation's worth of form values, exactly as entered."""

    bankroll: RawNumber
    odds: RawNumber
    odds_format: Union[OddsFormat, str]
    win_probability_pct: RawNumber


@dataclass(frozen=True)
class StakeResult:
    """Output of a single evaluation.

    When ``error`` is set every numeric field is zero or ``None`` and
    ``is_positive_edge`` is ``False``.
    """

    error: Optional[ErrorKind] = None
    error_detail: Optional[str] = None
    kelly_fraction: float = 0.0
    full_stake: float = 0.0
    half_stake: float = 0.0
    implied_probability_pct: Optional[float] = None
    net_odds: Optional[float] = None
    edge_pct: Optional[float] = None
    is_positive_edge: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class ValidatedInput:
    """Parsed, range-checked input ready for the Kelly math."""

    bankroll: float
    win_probability_pct: float
    odds: NormalizedOdds


# ---------------------------------------------------------------------------
# Parsing and validation
# ---------------------------------------------------------------------------

def parse_number(raw: RawNumber) -> Optional[float]:
    """Parse a form value into a finite float, or ``None`` if it is not one.

    Text is stripped before parsing.  Booleans, NaN, infinities and Python
    digit-grouping underscores (``"1_000"``) are not numbers for the form.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw or "_" in raw:
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def validate_input(
    stake_input: StakeInput,
) -> Tuple[Optional[ValidatedInput], Optional[ErrorKind], Optional[str]]:
    """Check the raw input and normalise the odds.

    Returns:
        ``(validated, None, None)`` on success, otherwise
        ``(None, error_kind, message)`` for the first failing check.
    """
    win_pct = parse_number(stake_input.win_probability_pct)
    if win_pct is None or win_pct < 0.0 or win_pct > 100.0:
        return None, ErrorKind.INVALID_PROBABILITY, MSG_PROBABILITY

    bankroll = parse_number(stake_input.bankroll)
    if bankroll is None or bankroll <= 0.0:
        return None, ErrorKind.INVALID_BANKROLL, MSG_BANKROLL

    odds_value = parse_number(stake_input.odds)
    if odds_value is None:
        return None, ErrorKind.INVALID_ODDS, MSG_ODDS_NAN

    try:
        odds_format = OddsFormat(stake_input.odds_format)
    except ValueError:
        return None, ErrorKind.INVALID_ODDS, MSG_ODDS_FORMAT

    try:
        odds = normalize_odds(odds_value, odds_format)
    except InvalidOddsError:
        return None, ErrorKind.INVALID_ODDS, MSG_DECIMAL_ODDS

    if odds.net_odds <= 0.0:
        return None, ErrorKind.INVALID_ODDS, MSG_NET_ODDS
    if not math.isfinite(odds.net_odds):
        return None, ErrorKind.INVALID_ODDS, MSG_ODDS_RANGE

    return ValidatedInput(bankroll=bankroll, win_probability_pct=win_pct, odds=odds), None, None


# ---------------------------------------------------------------------------
# Core logic
# ---------------------------------------------------------------------------

def evaluate(stake_input: StakeInput) -> StakeResult:
    """Validate ``stake_input`` and compute the Kelly recommendation."""
    validated, error, detail = validate_input(stake_input)
    if validated is None:
        logger.debug("Rejected stake input %s: %s", stake_input, error.value)
        return StakeResult(error=error, error_detail=detail)

    odds = validated.odds
    fraction = kelly_fraction(validated.win_probability_pct / 100.0, odds.net_odds)
    full_stake = stake_for(validated.bankroll, fraction)
    edge_pct = validated.win_probability_pct - odds.implied_probability_pct

    result = StakeResult(
        kelly_fraction=fraction,
        full_stake=full_stake,
        half_stake=full_stake / HALF_KELLY_DIVISOR,
        implied_probability_pct=odds.implied_probability_pct,
        net_odds=odds.net_odds,
        edge_pct=edge_pct,
        is_positive_edge=edge_pct > 0.0 and fraction > 0.0,
    )
    logger.debug(
        "Kelly %.4f on b=%.4f (edge %+.2f%%) -> full %.2f / half %.2f",
        fraction, odds.net_odds, edge_pct, result.full_stake, result.half_stake,
    )
    return result


def evaluate_stake(
    bankroll: RawNumber,
    odds: RawNumber,
    odds_format: Union[OddsFormat, str],
    win_probability_pct: RawNumber,
) -> StakeResult:
    """Convenience wrapper around :func:`evaluate` taking the four form fields."""
    return evaluate(StakeInput(
        bankroll=bankroll,
        odds=odds,
        odds_format=odds_format,
        win_probability_pct=win_probability_pct,
    ))
