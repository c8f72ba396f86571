"""Shared utilities for all dashboard pages."""

import logging

import streamlit as st
from dotenv import load_dotenv

from stakecalc.core.odds_math import OddsFormat
from stakecalc.settings import DashboardSettings, SettingsError, load_settings

load_dotenv()

ODDS_FORMAT_LABELS = {
    OddsFormat.AMERICAN.value: "American (+/-)",
    OddsFormat.DECIMAL.value:  "Decimal",
}

FORM_STATE_KEY = "form_values"


def get_settings() -> DashboardSettings:
    """Load settings once per session, stopping the page on bad config."""
    if "settings" not in st.session_state:
        try:
            settings = load_settings()
        except SettingsError as exc:
            st.error(str(exc))
            st.stop()
        logging.basicConfig(
            level=settings.log_level_value,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        st.session_state["settings"] = settings
    return st.session_state["settings"]


def form_values() -> dict:
    """Current raw form values, seeded from settings on first use."""
    if FORM_STATE_KEY not in st.session_state:
        settings = get_settings()
        st.session_state[FORM_STATE_KEY] = {
            "bankroll": f"{settings.default_bankroll:g}",
            "odds": f"{settings.default_odds:g}",
            "odds_format": settings.default_odds_format.value,
            "win_prob": f"{settings.default_win_prob_pct:g}",
        }
    return st.session_state[FORM_STATE_KEY]


def remember_form_values(**values) -> None:
    form_values().update(values)


def odds_format_selector(current: str, key: str) -> str:
    options = list(ODDS_FORMAT_LABELS)
    return st.selectbox(
        "Odds Format",
        options,
        index=options.index(current) if current in options else 0,
        format_func=ODDS_FORMAT_LABELS.get,
        key=key,
    )
