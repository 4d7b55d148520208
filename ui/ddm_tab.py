import pandas as pd
import streamlit as st

from apps.ddm_app import (
    MODEL_CONFIG,
    cash_flow_frame,
    format_rows,
    prices_by_model,
    run_ddm,
    selected_models,
    value_breakdown_frame,
)
from ui.utils import fmt_pct, fmt_price, fmt_usd


def render_ddm_tab(params: dict):
    selection = params["selection"]

    try:
        result = run_ddm(
            d0=params["d0"],
            required_pct=params["required_pct"],
            g_const_pct=params["g_const_pct"],
            g_short_pct=params["g_short_pct"],
            g_long_pct=params["g_long_pct"],
            short_years=params["short_years"],
        )
    except ValueError as e:
        st.error(str(e))
        return

    # ── Validation ────────────────────────────────────────────────────────────
    if result.has_errors:
        st.error(
            "**Input Validation Errors:**\n\n"
            + "\n".join(f"- {message}" for message in result.errors.values())
        )
        st.subheader("Validation Required")
        st.info("Please correct the input errors to see results and visualizations.")
        return

    keys = selected_models(selection)
    prices = prices_by_model(result)

    # ── Results ───────────────────────────────────────────────────────────────
    st.subheader("Results")
    cols = st.columns(len(keys))
    for col, key in zip(cols, keys):
        model = MODEL_CONFIG[key]
        col.metric(model["name"], fmt_price(prices[key]), help=model["description"])
        col.caption(model["formula"])

    st.divider()

    # ── Chart ─────────────────────────────────────────────────────────────────
    st.subheader("Equity Cash Flows")
    if selection == "all":
        st.caption("Showing: All dividend models for comparison")
    else:
        st.caption(f"Showing: {MODEL_CONFIG[selection]['name']} - {MODEL_CONFIG[selection]['description']}")

    chart_data = cash_flow_frame(result, selection)
    st.bar_chart(
        chart_data,
        x_label="Years",
        y_label="Cash Flow ($)",
        color=[MODEL_CONFIG[key]["color"] for key in keys],
        stack=False,
    )
    st.caption("Year 0 shows the negative initial investment cost (the model price).")

    # ── Year-by-year table ────────────────────────────────────────────────────
    st.subheader("Year-by-Year Cash Flows")
    st.dataframe(pd.DataFrame(format_rows(result, selection)), hide_index=True, use_container_width=True)

    # ── Two-stage value breakdown ─────────────────────────────────────────────
    breakdown = value_breakdown_frame(result)
    if "changing" in keys and breakdown is not None:
        st.divider()
        st.subheader("Changing Growth Value Breakdown")
        c1, c2 = st.columns(2)
        with c1:
            st.bar_chart(breakdown)
        with c2:
            summary_df = pd.DataFrame([
                ("PV of High-Growth Dividends", fmt_usd(result.breakdown.pv_high_growth)),
                ("Terminal Dividend",           fmt_usd(result.breakdown.terminal_dividend)),
                ("Terminal Value (TV)",         fmt_usd(result.breakdown.terminal_value)),
                ("PV of Terminal Value",        fmt_usd(result.breakdown.pv_terminal)),
                ("Intrinsic Value per Share",   fmt_price(result.two_stage)),
            ], columns=["Item", "Value"])
            st.dataframe(summary_df, hide_index=True, use_container_width=True)

    # ── Formula & Assumptions ──────────────────────────────────────────────────
    with st.expander("📐 Model Equations & Assumptions"):
        fcol, acol = st.columns([3, 2])

        with fcol:
            for model in MODEL_CONFIG.values():
                st.markdown(f"**{model['name']}**")
                st.latex(model["latex"])
            st.markdown(r"""
| Symbol | Description |
|---|---|
| $D_0$ | Most recent dividend per share |
| $r$ | Required rate of return |
| $g$ | Constant growth rate |
| $g_s$ | Short-term (high) growth rate |
| $g_l$ | Long-term sustainable growth rate |
| $n$ | High-growth years |
""")

        with acol:
            st.markdown("**Assumptions Used in This Calculation**")
            for label, value in [
                ("D₀ — Current Dividend",    fmt_usd(params["d0"])),
                ("r — Required Return",      fmt_pct(params["required_pct"] / 100)),
                ("g — Constant Growth",      fmt_pct(params["g_const_pct"] / 100)),
                ("g_s — Short-term Growth",  fmt_pct(params["g_short_pct"] / 100)),
                ("g_l — Long-term Growth",   fmt_pct(params["g_long_pct"] / 100)),
                ("n — High Growth Years",    f"{params['short_years']} years"),
            ]:
                st.markdown(f"- {label}: **{value}**")

    st.info(
        "**Dividend Discount Models:** Value stocks based on present value of "
        "expected future dividend payments."
    )
