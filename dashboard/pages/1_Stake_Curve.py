"""Stake Curve page."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

import plotly.graph_objects as go
import streamlit as st

from dashboard.utils import form_values, get_settings, odds_format_selector
from stakecalc.services.calculator import evaluate_stake
from stakecalc.services.display import format_currency
from stakecalc.services.sweep import stake_curve

st.set_page_config(page_title="Stake Curve | Pro Betting Dashboard", layout="wide")
get_settings()
values = form_values()

st.title("Stake Curve")
st.caption(
    "How the Kelly stake responds to your win-probability estimate at a fixed price. "
    "The stake stays at zero until your estimate clears the market's implied probability."
)

c1, c2, c3, c4 = st.columns(4)
with c1:
    bankroll = st.text_input("Bankroll ($)", value=values["bankroll"], key="curve_bankroll")
with c2:
    odds_format = odds_format_selector(values["odds_format"], key="curve_odds_format")
with c3:
    odds = st.text_input("Odds", value=values["odds"], key="curve_odds")
with c4:
    step = st.select_slider("Grid step (%)", options=[0.5, 1.0, 2.0, 5.0], value=1.0)

# Any valid probability surfaces the bankroll/odds error and the implied price.
probe = evaluate_stake(bankroll, odds, odds_format, 50)
if not probe.ok:
    st.error(probe.error_detail)
    st.stop()

implied = probe.implied_probability_pct
df = stake_curve(bankroll, odds, odds_format, step_pct=step)

# --- Header metrics ---
m1, m2, m3 = st.columns(3)
m1.metric("Break-even Probability", f"{implied:.2f}%")
m2.metric("Max Full Kelly Stake", format_currency(df["full_stake"].max()))
first_positive = df.loc[df["is_positive_edge"], "win_probability_pct"]
m3.metric(
    "First Positive-EV Point",
    f"{first_positive.iloc[0]:.1f}%" if not first_positive.empty else "N/A",
)

st.markdown("---")

fig = go.Figure()
fig.add_trace(go.Scatter(
    x=df["win_probability_pct"], y=df["full_stake"],
    mode="lines", name="Full Kelly",
))
fig.add_trace(go.Scatter(
    x=df["win_probability_pct"], y=df["half_stake"],
    mode="lines", name="Half Kelly",
    line=dict(dash="dash"),
))
fig.add_vline(
    x=implied, line_dash="dot", line_color="gray",
    annotation_text="Implied", annotation_position="top left",
)
fig.update_layout(
    xaxis=dict(title="Your Win Probability (%)", range=[0, 100]),
    yaxis=dict(title="Stake ($)", tickprefix="$"),
    height=420,
)
st.plotly_chart(fig, use_container_width=True)

# --- Data table ---
st.subheader("Grid Detail")
df_display = df.copy()
df_display["kelly_fraction"] = df_display["kelly_fraction"].map("{:.2%}".format)
df_display["full_stake"] = df_display["full_stake"].map(format_currency)
df_display["half_stake"] = df_display["half_stake"].map(format_currency)
df_display["edge_pct"] = df_display["edge_pct"].map("{:+.2f}%".format)
st.dataframe(
    df_display.rename(columns={
        "win_probability_pct": "Win %", "kelly_fraction": "Kelly f*",
        "full_stake": "Full Kelly", "half_stake": "Half Kelly",
        "edge_pct": "Edge", "is_positive_edge": "+EV",
    }),
    hide_index=True, use_container_width=True,
)
