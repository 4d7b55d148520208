"""
Dividend Discount Model Calculator — Streamlit UI

Key Inputs Needed for the DDM Models:
+-----------------------------+-------------------------------------------------------+
| Symbol / Label              | Description                                           |
+-----------------------------+-------------------------------------------------------+
| D₀   Current Dividend       | Most recent dividend per share                        |
| r    Required Return        | Investor's required return, e.g. 8-12%                |
| g    Constant Growth        | Perpetual dividend growth (Constant Growth model)     |
| g_s  Short-term Growth      | Initial high growth rate (Changing Growth model)      |
| g_l  Long-term Growth       | Sustainable growth after the high-growth years        |
| n    High Growth Years      | Length of the high-growth phase                       |
+-----------------------------+-------------------------------------------------------+

Run with:
    uv run streamlit run main.py
"""

import logging

import streamlit as st

from config.settings import settings
from ui.ddm_tab import render_ddm_tab
from ui.sidebar import render_sidebar

logging.basicConfig(level=settings.log_level.upper())

st.set_page_config(page_title="DDM Valuation", page_icon="💵", layout="wide")

st.title("💵 Dividend Discount Model Calculator")
st.caption("Price a share as the present value of its expected future dividends")

params = render_sidebar()
render_ddm_tab(params)
