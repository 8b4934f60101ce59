# streamlit_app.py
import os
import sys

import streamlit as st

# Ensure the code root is on sys.path so `app` and `savings` import when Streamlit runs this file directly.
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from app.config import APP_TITLE, CURRENCY_LABEL, DEFAULT_DARK, configure_logging  # noqa: E402
from app.core.tools import build_view, theme_for  # noqa: E402
from savings.state import CalculatorSession  # noqa: E402

FIELDS = [
    {"label": "Target Amount", "name": "target_savings", "currency": True},
    {"label": "Duration (months)", "name": "duration_months", "currency": False},
    {"label": "Monthly Income", "name": "monthly_income", "currency": True},
]

st.set_page_config(page_title=APP_TITLE, layout="wide")

if "calculator" not in st.session_state:
    configure_logging()
    st.session_state.calculator = CalculatorSession(dark=DEFAULT_DARK)
    st.session_state.error = None

session: CalculatorSession = st.session_state.calculator


# Helper functions
def on_field_change(name: str):
    session.form.set_field(name, st.session_state[f"field_{name}"])


def on_calculate():
    # the button callback can run before a pending text-input on_change
    keys = {f["name"]: f"field_{f['name']}" for f in FIELDS}
    session.form.set_fields({name: st.session_state[key] for name, key in keys.items() if key in st.session_state})
    _, error = session.calculate_or_error()
    st.session_state.error = error


def on_toggle():
    session.mode.toggle()


def apply_theme(dark: bool):
    theme = theme_for(dark)
    st.markdown(
        f"""
<style>
.stApp {{ background: {theme['background']}; color: {theme['text']}; }}
.stApp h1, .stApp label, .stApp p {{ color: {theme['text']}; }}
.stTextInput input {{ background: {theme['input']}; color: {theme['text']}; border: 1px solid {theme['border']}; }}
.savings-card {{ background: {theme['card']}; color: {theme['text']}; border-radius: 12px; padding: 1.5rem; margin-bottom: 1.5rem; position: relative; }}
.savings-badge {{ position: absolute; top: 1rem; right: 1rem; padding: 0.2rem 0.75rem; border-radius: 999px; font-size: 0.75rem; font-weight: 600; color: #fff; }}
.savings-bar {{ background: #374151; border-radius: 999px; height: 0.75rem; overflow: hidden; margin-top: 1rem; }}
.savings-bar > div {{ height: 100%; border-radius: 999px; }}
.savings-label {{ color: #c084fc; font-weight: 600; }}
</style>
""",
        unsafe_allow_html=True,
    )


def render_card(card: dict):
    st.markdown(
        f"""
<div class="savings-card">
  <h3>{card['title']}</h3>
  <span class="savings-badge" style="background: {card['status_color']}">{card['status_label']}</span>
  <p><span class="savings-label">Monthly Savings:</span> {card['monthly_savings']}</p>
  <p><span class="savings-label">{card['total_caption']}:</span> {card['total_savings']}</p>
  <p><span class="savings-label">{card['progress_text']}</span></p>
  <div class="savings-bar"><div style="width: {card['progress_width']}%; background: {card['status_color']}"></div></div>
  <hr/>
  <p>Monthly Budget: <b>{card['monthly_budget']}</b></p>
  <p>Weekly Budget: <b>{card['weekly_budget']}</b></p>
  <p>Daily Budget: <b>{card['daily_budget']}</b></p>
</div>
""",
        unsafe_allow_html=True,
    )


# --- Page ------------------------------------------------------------------
dark = session.mode.get()
apply_theme(dark)

title_col, toggle_col = st.columns([10, 1])
with title_col:
    st.title(f"💰 {APP_TITLE}")
with toggle_col:
    st.button(theme_for(dark)["toggle_icon"], on_click=on_toggle, help="Toggle dark mode")

form = session.form.get_all()
columns = st.columns(len(FIELDS))
for col, field in zip(columns, FIELDS):
    with col:
        st.text_input(
            f"{field['label']} ({CURRENCY_LABEL})" if field["currency"] else field["label"],
            value=getattr(form, field["name"]),
            key=f"field_{field['name']}",
            on_change=on_field_change,
            args=(field["name"],),
        )

st.button("Calculate", on_click=on_calculate, type="primary")

if st.session_state.error:
    st.error(st.session_state.error)

result_set = session.result.get()
if result_set is not None:
    cards = build_view(result_set)
    grid = st.columns(3)
    for idx, card in enumerate(cards):
        with grid[idx % 3]:
            render_card(card)

st.caption("© 2025 Savings Calculator")
