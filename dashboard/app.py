"""
Streamlit Dashboard for the Kelly stake calculator
Recomputes the recommendation on every rerun (i.e. every edit of the form)
"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import streamlit as st

from dashboard.utils import form_values, get_settings, odds_format_selector, remember_form_values
from stakecalc.services.calculator import evaluate_stake
from stakecalc.services.display import build_view, equivalent_odds

st.set_page_config(
    page_title="Pro Betting Dashboard",
    page_icon="🎯",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown("""
    <style>
    .positive { color: green; }
    .negative { color: red; }
    .muted { color: gray; font-size: 0.9em; }
    </style>
""", unsafe_allow_html=True)

get_settings()
values = form_values()


# ==============================================================================
# HEADER
# ==============================================================================

st.title("Pro Betting Dashboard")
st.caption("Maximize returns using algorithmic staking and AI insights.")


# ==============================================================================
# KELLY CRITERION CALCULATOR
# ==============================================================================

st.header("🧮 Kelly Criterion Calculator")
st.caption("Optimize your stake size based on edge.")

left, right = st.columns(2)

with left:
    bankroll = st.text_input(
        "💵 Total Bankroll ($)", value=values["bankroll"], key="kelly_bankroll",
        help="Your total available betting funds.",
    )

    c1, c2 = st.columns(2)
    with c1:
        odds_format = odds_format_selector(values["odds_format"], key="kelly_odds_format")
    with c2:
        odds = st.text_input("Odds", value=values["odds"], key="kelly_odds")

    win_prob = st.text_input(
        "📈 Your Win Probability (%)", value=values["win_prob"], key="kelly_prob",
        help="Your estimated chance of winning.",
    )

    remember_form_values(bankroll=bankroll, odds=odds, odds_format=odds_format, win_prob=win_prob)

    result = evaluate_stake(bankroll, odds, odds_format, win_prob)
    view = build_view(result)

    st.caption(view.odds_hint)
    equivalent = equivalent_odds(odds, odds_format)
    if equivalent:
        st.caption(f"Equivalent: {equivalent}")

with right:
    st.subheader("Analysis")
    if view.error_message:
        st.error(view.error_message)
    else:
        st.metric(
            "Expected Value (EV)",
            view.edge_text,
            delta="positive" if view.is_positive_edge else "negative",
            delta_color="normal" if view.is_positive_edge else "inverse",
            help="Your estimated edge over the market.",
        )

        k1, k2 = st.columns(2)
        with k1:
            st.metric("Full Kelly Bet", view.full_stake_text)
            st.caption(view.full_stake_caption)
        with k2:
            st.metric("Half Kelly Bet", view.half_stake_text)
            st.caption(view.half_stake_caption)

        if view.warning:
            st.warning(view.warning, icon="⚠️")


# ==============================================================================
# AI MARKET INSIGHTS (static placeholder)
# ==============================================================================

st.markdown("---")
st.header("✨ AI Market Insights")
st.caption("Identifying market inefficiency.")
with st.container(border=True):
    st.markdown("**Sample Prediction**")
    st.caption("This demo runs simulated market analysis based on bookmaker disagreement.")
