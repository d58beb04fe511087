"""
Brave Chain Calculator Web App
Streamlit interface for ranking card play orders.
"""

import streamlit as st
import pandas as pd
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from brave_chain.calculator import ChainCalculator
from brave_chain.engine.cards import CardKind, format_hand
from brave_chain.engine.scoring import FormulaConfig
from brave_chain.errors import ParseError

CARD_ICONS = {
    CardKind.BUSTER: "🟥",
    CardKind.ARTS: "🟦",
    CardKind.QUICK: "🟩",
}

# Page config
st.set_page_config(
    page_title="Brave Chain Calculator",
    page_icon="🃏",
    layout="wide"
)

st.title("🃏 Brave Chain Calculator")
st.markdown("*Every play order of a three-card hand, ranked by damage and NP gain*")

# Sidebar for settings
st.sidebar.header("Servant")
defaults = FormulaConfig()
attack = st.sidebar.number_input("Attack", min_value=0.0, value=defaults.servant_attack, step=100.0)
np_rate = st.sidebar.number_input("NP rate", min_value=0.0, value=defaults.np_rate,
                                  step=0.001, format="%.3f")
star_rate = st.sidebar.number_input("Star generation", min_value=0.0, value=defaults.star_generation,
                                    step=0.01, format="%.2f")

config = FormulaConfig(servant_attack=attack, np_rate=np_rate, star_generation=star_rate)

# Hand selection
st.subheader("Hand")
input_mode = st.radio("Input", ["Pick cards", "Card codes"], horizontal=True)

kinds = list(CardKind)
query = ""
if input_mode == "Pick cards":
    cols = st.columns(3)
    picked = []
    for i, col in enumerate(cols):
        with col:
            kind = st.selectbox(
                f"Card {i + 1}",
                options=kinds,
                index=i,
                format_func=lambda k: f"{CARD_ICONS[k]} {k.value}",
            )
            picked.append(kind)
    query = format_hand(picked)
else:
    query = st.text_input("Cards (a/b/q)", value="bbq")

st.divider()


def ranking_frame(entries) -> pd.DataFrame:
    return pd.DataFrame([
        {
            "Order": " ".join(CARD_ICONS[k] for k in e.hand) + f"  {e.code}",
            "Damage": round(e.stats.damage),
            "NP": round(e.stats.np, 3),
            "Stars": round(e.stats.stars, 1),
        }
        for e in entries
    ])


try:
    report = ChainCalculator(config).evaluate_codes(query)
except ParseError as err:
    st.error(str(err))
    st.stop()

if report.chain:
    st.success(f"⛓️ {report.chain.value} chain")
else:
    st.info("No chain")

col1, col2, col3 = st.columns(3)
with col1:
    st.metric("Distinct orders", len(report.by_damage))
with col2:
    st.metric(f"Best damage ({report.best_damage.code})", f"{report.best_damage.stats.damage:,.0f}")
with col3:
    st.metric(f"Best NP ({report.best_np.code})", f"{report.best_np.stats.np:.3f}")

col1, col2 = st.columns(2)
with col1:
    st.subheader("⚔️ By Damage")
    st.dataframe(ranking_frame(report.by_damage), hide_index=True, use_container_width=True)
with col2:
    st.subheader("🔋 By NP")
    st.dataframe(ranking_frame(report.by_np), hide_index=True, use_container_width=True)

# Per-order breakdown
st.subheader("📜 Breakdown")
for entry in report.by_damage:
    breakdown = report.breakdowns[entry.hand]
    with st.expander(str(entry)):
        for line in breakdown.details:
            st.code(line)

# Footer
st.divider()
st.markdown("*Built with Brave Chain engine*")
