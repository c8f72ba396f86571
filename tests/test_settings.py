"""
Tests for dashboard settings loaded from the environment
Run with: pytest tests/test_settings.py -v
"""

import logging

import pytest

from stakecalc.core.odds_math import OddsFormat
from stakecalc.settings import DashboardSettings, SettingsError, load_settings


class TestDefaults:
    """Unset variables fall back to the form defaults"""

    def test_empty_environment(self):
        settings = load_settings({})

        assert settings.default_bankroll == 1000.0
        assert settings.default_odds == 200.0
        assert settings.default_odds_format is OddsFormat.AMERICAN
        assert settings.default_win_prob_pct == 55.0
        assert settings.log_level == "INFO"
        assert settings.log_level_value == logging.INFO

    def test_blank_values_ignored(self):
        settings = load_settings({"DEFAULT_BANKROLL": "  ", "LOG_LEVEL": ""})

        assert settings.default_bankroll == 1000.0
        assert settings.log_level == "INFO"

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_WIN_PROB", "60")

        assert load_settings().default_win_prob_pct == 60.0


class TestOverrides:
    """Environment values are parsed and normalised"""

    def test_all_overrides(self):
        settings = load_settings({
            "DEFAULT_BANKROLL": "2500",
            "DEFAULT_ODDS": "1.95",
            "DEFAULT_ODDS_FORMAT": " Decimal ",
            "DEFAULT_WIN_PROB": "52.5",
            "LOG_LEVEL": "debug",
        })

        assert settings.default_bankroll == 2500.0
        assert settings.default_odds == 1.95
        assert settings.default_odds_format is OddsFormat.DECIMAL
        assert settings.default_win_prob_pct == 52.5
        assert settings.log_level == "DEBUG"
        assert settings.log_level_value == logging.DEBUG

    def test_settings_are_frozen(self):
        settings = load_settings({})

        with pytest.raises(Exception):
            settings.default_bankroll = 5.0


class TestInvalid:
    """Bad values raise SettingsError"""

    @pytest.mark.parametrize("env", [
        {"DEFAULT_BANKROLL": "0"},
        {"DEFAULT_BANKROLL": "-10"},
        {"DEFAULT_BANKROLL": "lots"},
        {"DEFAULT_BANKROLL": "inf"},
        {"DEFAULT_ODDS": "evens"},
        {"DEFAULT_ODDS_FORMAT": "fractional"},
        {"DEFAULT_WIN_PROB": "101"},
        {"LOG_LEVEL": "verbose"},
    ])
    def test_rejected(self, env):
        with pytest.raises(SettingsError):
            load_settings(env)

    def test_settings_error_is_value_error(self):
        with pytest.raises(ValueError):
            load_settings({"DEFAULT_WIN_PROB": "-1"})

    def test_direct_model_validation(self):
        assert DashboardSettings(default_odds_format="american").default_odds_format is OddsFormat.AMERICAN
