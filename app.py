import streamlit as st

from core.logging_setup import setup_logging
from core.presets import DISCLAIMER
from loancalc import __version__
from ui.calculator import render_calculator
from ui.graph import render_graph
from ui.schedule import render_schedule

st.set_page_config(page_title="LOAN CALCULATOR", layout="centered")
setup_logging()

st.title("LOAN CALCULATOR")
st.caption("Pick the unknown • Enter the other three • Fixed rate, monthly payments")

result = render_calculator()

graph_tab, schedule_tab = st.tabs(["Graph", "Schedule"])
with graph_tab:
    render_graph(result)
with schedule_tab:
    render_schedule(result)

st.divider()
st.caption(DISCLAIMER)
st.sidebar.caption(f"v{__version__}")
