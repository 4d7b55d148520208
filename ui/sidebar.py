import streamlit as st

from apps.ddm_app import MODEL_CONFIG, MODEL_SELECTIONS
from config.settings import settings

_SELECTION_LABELS = {"all": "All", "constant": "Constant", "growth": "Growth", "changing": "Changing"}


def render_sidebar() -> dict:
    """
    Collects the six DDM parameters and the model selection.

    Returns:
        dict with keys d0, required_pct, g_const_pct, g_short_pct, g_long_pct,
        short_years, selection.
    """
    with st.sidebar:
        st.header("Dividend Discount Model Calculator")

        default_model = settings.default_model if settings.default_model in MODEL_SELECTIONS else "constant"
        selection = st.radio(
            "Model",
            MODEL_SELECTIONS,
            index=MODEL_SELECTIONS.index(default_model),
            format_func=_SELECTION_LABELS.get,
            horizontal=True,
            key="ddm_model",
        )
        if selection != "all":
            st.caption(MODEL_CONFIG[selection]["description"])

        st.divider()

        d0 = st.number_input(
            "Current Dividend ($) *", value=settings.default_d0, step=0.1,
            help="Most recent dividend", key="ddm_d0",
        )
        required_pct = st.number_input(
            "Required Return (%) *", value=settings.default_required_pct, step=0.1,
            help="Investor's required return", key="ddm_req",
        )

        st.markdown("**Constant Growth**")
        g_const_pct = st.number_input(
            "Constant Growth (%)", value=settings.default_g_const_pct, step=0.1,
            help="Constant dividend growth rate", key="ddm_gconst",
        )

        st.markdown("**Changing Growth**")
        g_short_pct = st.number_input(
            "Short-term Growth (%)", value=settings.default_g_short_pct, step=0.1,
            help="Initial high growth rate", key="ddm_gshort",
        )
        g_long_pct = st.number_input(
            "Long-term Growth (%)", value=settings.default_g_long_pct, step=0.1,
            help="Sustainable growth rate", key="ddm_glong",
        )
        short_years = st.number_input(
            "High Growth Years", min_value=0, max_value=settings.max_short_years,
            value=min(settings.default_short_years, settings.max_short_years), step=1,
            help="Years of high growth", key="ddm_years",
        )

        st.caption("\\* required")

    return {
        "d0": d0,
        "required_pct": required_pct,
        "g_const_pct": g_const_pct,
        "g_short_pct": g_short_pct,
        "g_long_pct": g_long_pct,
        "short_years": int(short_years),
        "selection": selection,
    }
