"""
Tests for the stake curve
Run with: pytest tests/test_sweep.py -v
"""

import pytest

from stakecalc.services.calculator import evaluate_stake
from stakecalc.services.sweep import CURVE_COLUMNS, stake_curve


class TestStakeCurve:
    """Grid evaluation over win probabilities"""

    def test_grid_shape(self):
        df = stake_curve(1000, 200, "american", step_pct=1.0)

        assert list(df.columns) == CURVE_COLUMNS
        assert len(df) == 101
        assert df["win_probability_pct"].iloc[0] == 0.0
        assert df["win_probability_pct"].iloc[-1] == 100.0

    def test_coarse_grid(self):
        df = stake_curve(1000, 200, "american", step_pct=5.0)

        assert len(df) == 21

    def test_matches_calculator(self):
        df = stake_curve(1000, 200, "american", step_pct=5.0)
        row = df[df["win_probability_pct"] == 55.0].iloc[0]

        assert row["full_stake"] == pytest.approx(evaluate_stake(1000, 200, "american", 55).full_stake)
        assert row["half_stake"] == pytest.approx(162.5)
        assert bool(row["is_positive_edge"])

    def test_zero_below_break_even(self):
        df = stake_curve(1000, 100, "american", step_pct=1.0)
        below = df[df["win_probability_pct"] <= 50.0]

        assert (below["full_stake"] == 0.0).all()
        assert not below["is_positive_edge"].any()

    def test_monotonic_non_decreasing(self):
        df = stake_curve(1000, -120, "american", step_pct=0.5)

        assert df["full_stake"].is_monotonic_increasing

    def test_invalid_inputs_give_empty_frame(self):
        df = stake_curve(0, 200, "american")

        assert df.empty
        assert list(df.columns) == CURVE_COLUMNS

    def test_invalid_decimal_odds_give_empty_frame(self):
        assert stake_curve(1000, 1.0, "decimal").empty

    @pytest.mark.parametrize("step", [0, -1, 101])
    def test_rejects_bad_step(self, step):
        with pytest.raises(ValueError):
            stake_curve(1000, 200, "american", step_pct=step)
