"""
Dashboard settings read from the environment.

Only presentation defaults live here; the calculator itself takes every value
as an explicit argument.  Values come from the process environment, which the
dashboard populates from ``.env`` via ``python-dotenv`` before calling
:func:`load_settings`.

    DEFAULT_BANKROLL     starting bankroll shown on the form      (1000)
    DEFAULT_ODDS         starting odds shown on the form          (200)
    DEFAULT_ODDS_FORMAT  "american" or "decimal"                  (american)
    DEFAULT_WIN_PROB     starting win probability, percent        (55)
    LOG_LEVEL            root logging level                       (INFO)
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from stakecalc.core.odds_math import OddsFormat

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

_ENV_FIELDS = {
    "DEFAULT_BANKROLL": "default_bankroll",
    "DEFAULT_ODDS": "default_odds",
    "DEFAULT_ODDS_FORMAT": "default_odds_format",
    "DEFAULT_WIN_PROB": "default_win_prob_pct",
    "LOG_LEVEL": "log_level",
}


class SettingsError(ValueError):
    """Raised when an environment variable holds an unusable value."""


class DashboardSettings(BaseModel):
    """Validated form defaults and logging level."""

    default_bankroll: float = Field(1000.0, gt=0, allow_inf_nan=False, description="Bankroll pre-filled on the form")
    default_odds: float = Field(200.0, allow_inf_nan=False, description="Odds pre-filled on the form")
    default_odds_format: OddsFormat = Field(OddsFormat.AMERICAN)
    default_win_prob_pct: float = Field(55.0, ge=0.0, le=100.0, allow_inf_nan=False)
    log_level: str = Field("INFO")

    model_config = {"frozen": True}

    @field_validator("default_odds_format", mode="before")
    @classmethod
    def normalize_format(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {v!r}")
        return level

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def load_settings(environ: Optional[Mapping[str, str]] = None) -> DashboardSettings:
    """Build :class:`DashboardSettings` from ``environ`` (default ``os.environ``).

    Unset or blank variables fall back to the field defaults.

    Raises:
        SettingsError: If any variable fails validation.
    """
    env = os.environ if environ is None else environ
    values = {}
    for var, field_name in _ENV_FIELDS.items():
        raw = env.get(var)
        if raw is not None and raw.strip():
            values[field_name] = raw.strip()

    try:
        return DashboardSettings(**values)
    except ValidationError as exc:
        raise SettingsError(f"Invalid dashboard settings: {exc}") from exc
