"""
Stake curve: the Kelly recommendation across a range of win probabilities.

Used by the dashboard's "Stake Curve" page to show how quickly the stake
grows once the bettor's estimate clears the market's implied probability.
Every point is produced by ``evaluate_stake`` so the curve can never disagree
with the calculator.
"""

import logging
from typing import Union

import numpy as np
import pandas as pd

from stakecalc.core.odds_math import OddsFormat
from stakecalc.services.calculator import RawNumber, evaluate_stake
from stakecalc.services.display import displayed_full_stake, displayed_half_stake

logger = logging.getLogger(__name__)

CURVE_COLUMNS = [
    "win_probability_pct",
    "kelly_fraction",
    "full_stake",
    "half_stake",
    "edge_pct",
    "is_positive_edge",
]


def stake_curve(
    bankroll: RawNumber,
    odds: RawNumber,
    odds_format: Union[OddsFormat, str],
    step_pct: float = 1.0,
) -> pd.DataFrame:
    """Evaluate the calculator for win probabilities ``0, step, ..., 100``.

    Stakes are the displayed values (zero without a positive edge).

    Args:
        bankroll: Bankroll as entered on the form.
        odds: Odds as entered on the form.
        odds_format: ``"american"`` or ``"decimal"``.
        step_pct: Grid spacing in percentage points, in ``(0, 100]``.

    Returns:
        One row per grid point with :data:`CURVE_COLUMNS`.  Empty when the
        bankroll or odds are invalid, since no point on the curve would be.

    Raises:
        ValueError: If ``step_pct`` is outside ``(0, 100]``.
    """
    if not (0.0 < step_pct <= 100.0):
        raise ValueError(f"step_pct must be in (0, 100], got {step_pct!r}.")

    grid = np.arange(0.0, 100.0 + step_pct / 2, step_pct)
    grid = grid[grid <= 100.0]

    rows = []
    for pct in grid:
        result = evaluate_stake(bankroll, odds, odds_format, float(pct))
        if not result.ok:
            logger.debug("Stake curve aborted at %.2f%%: %s", pct, result.error_detail)
            return pd.DataFrame(columns=CURVE_COLUMNS)
        rows.append({
            "win_probability_pct": float(pct),
            "kelly_fraction": result.kelly_fraction,
            "full_stake": displayed_full_stake(result),
            "half_stake": displayed_half_stake(result),
            "edge_pct": result.edge_pct,
            "is_positive_edge": result.is_positive_edge,
        })

    return pd.DataFrame(rows, columns=CURVE_COLUMNS)
