"""Kelly criterion sizing — the single source of truth for bet sizing math.

All functions here are **pure**: no I/O, no logging.
Import from this module; never reimplement Kelly in the dashboard.

The Kelly criterion maximises the expected logarithm of wealth by solving::

    max_f  E[log(1 + f · X)]

where ``X`` pays ``b`` with probability ``p`` and ``−1`` with probability
``q = 1 − p``.  The closed-form solution (Kelly 1956) is::

    f*  =  (b · p − q) / b                                   (1)

A negative ``f*`` means the bet has negative expectation; it is clamped to
zero (never bet, never lay).

Run tests with::

    pytest tests/test_kelly.py -v
"""

from __future__ import annotations

import math
from typing import Final

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

#: Divisor for the conservative "half Kelly" recommendation shown beside
#: full Kelly on the form.
HALF_KELLY_DIVISOR: Final[float] = 2.0


# ---------------------------------------------------------------------------
# Kelly fraction
# ---------------------------------------------------------------------------


def kelly_fraction(win_prob: float, net_odds: float) -> float:
    """Full Kelly fraction of bankroll for a simple win/loss bet.

    Args:
        win_prob: Estimated probability of winning, in ``[0, 1]``.
        net_odds: Profit per unit staked (``b``).  Use
            :func:`~stakecalc.core.odds_math.normalize_odds` to obtain it.

    Returns:
        ``max(0, f*)`` from equation (1).  Strictly below 1.0 unless
        ``win_prob == 1``.

    Raises:
        ValueError: If ``win_prob`` is outside ``[0, 1]`` or
            ``net_odds`` is not a finite number above zero.

    Examples::

        kelly_fraction(0.55, 2.0)  →  0.325
        kelly_fraction(0.40, 1.0)  →  0.000  (negative EV → 0)
    """
    if not (0.0 <= win_prob <= 1.0):
        raise ValueError(f"win_prob must be in [0, 1], got {win_prob!r}.")
    if not math.isfinite(net_odds) or net_odds <= 0.0:
        raise ValueError(f"net_odds must be finite and > 0, got {net_odds!r}.")

    loss_prob = 1.0 - win_prob
    full_kelly = (net_odds * win_prob - loss_prob) / net_odds
    return max(0.0, full_kelly)


def fractional_kelly(fraction: float, divisor: float = HALF_KELLY_DIVISOR) -> float:
    """Scale a full Kelly fraction down by ``divisor`` (default half Kelly).

    Raises:
        ValueError: If ``divisor <= 0``.
    """
    if divisor <= 0.0:
        raise ValueError(f"divisor must be > 0, got {divisor!r}.")
    return fraction / divisor


# ---------------------------------------------------------------------------
# Utility — unit conversion
# ---------------------------------------------------------------------------


def stake_for(bankroll: float, fraction: float) -> float:
    """Dollar stake for a bankroll and a Kelly fraction.

    Examples::

        stake_for(1000.0, 0.325) → 325.0
    """
    return bankroll * fraction


def kelly_to_pct_of_bankroll(fraction: float) -> float:
    """Convert a Kelly fraction to percent of bankroll for display.

    Examples::

        kelly_to_pct_of_bankroll(0.325) → 32.5
    """
    return fraction * 100.0
