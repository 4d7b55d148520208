"""
DDM application layer: public API for the dividend discount calculator.

Formatting boundary: the model (models.ddm_model) returns raw numbers and
ModelPrice results. This layer converts percentages coming from the UI,
maps model keys to display metadata, and shapes rows and chart frames for
callers.
"""

import logging
import math

import pandas as pd

from models.ddm_model import (
    CONSTANT_GROWTH,
    NO_GROWTH,
    TWO_STAGE,
    DDMInputs,
    DDMResult,
    ModelPrice,
    compute,
)

logger = logging.getLogger(__name__)

# Display metadata, in presentation order.
MODEL_CONFIG = {
    "constant": {
        "name":        "Constant Dividend Model",
        "color":       "#2563eb",
        "column":      NO_GROWTH,
        "description": "Assumes dividends remain constant forever.",
        "formula":     "P = D₀ ÷ r",
        "latex":       r"P = \frac{D_0}{r}",
    },
    "growth": {
        "name":        "Constant Growth Model",
        "color":       "#16a34a",
        "column":      CONSTANT_GROWTH,
        "description": "Assumes constant dividend growth rate forever.",
        "formula":     "P = D₁ ÷ (r - g)",
        "latex":       r"P = \frac{D_0 (1 + g)}{r - g}",
    },
    "changing": {
        "name":        "Changing Growth Model",
        "color":       "#9333ea",
        "column":      TWO_STAGE,
        "description": "Assumes high growth initially, then lower sustainable growth.",
        "formula":     "PV high growth + Terminal value",
        "latex":       r"P = \sum_{t=1}^{n} \frac{D_0 (1 + g_s)^t}{(1+r)^t}"
                       r" + \frac{D_0 (1 + g_s)^n (1 + g_l)}{(r - g_l)(1+r)^n}",
    },
}

MODEL_SELECTIONS = ("all", *MODEL_CONFIG)


def run_ddm(
    d0: float,
    required_pct: float,
    g_const_pct: float,
    g_short_pct: float,
    g_long_pct: float,
    short_years: int,
) -> DDMResult:
    """
    Runs all three dividend discount models from UI-style inputs.

    Args:
        d0: Most recent dividend per share ($)
        required_pct: Required rate of return in percent (e.g. 10 for 10%)
        g_const_pct: Constant growth rate in percent
        g_short_pct: High growth rate in percent (two-stage)
        g_long_pct: Long-term growth rate in percent (two-stage)
        short_years: Number of high-growth years

    Returns:
        DDMResult with three ModelPrice values, 11 cash-flow rows and the
        validation messages.

    Raises:
        InputError: short_years is not an integer in 0..MAX_YEARS, or a field is not numeric.
    """
    inputs = DDMInputs(
        d0=d0,
        required=required_pct / 100,
        g_const=g_const_pct / 100,
        g_short=g_short_pct / 100,
        g_long=g_long_pct / 100,
        short_years=short_years,
    )
    result = compute(inputs)
    if result.has_errors:
        logger.info("DDM inputs failed validation: %s", ", ".join(sorted(result.errors)))
    return result


def selected_models(selection: str) -> list[str]:
    """Model keys shown for a selector value ("all" or one MODEL_CONFIG key)."""
    if selection == "all":
        return list(MODEL_CONFIG)
    if selection not in MODEL_CONFIG:
        raise ValueError(f"Unknown model selection '{selection}'.")
    return [selection]


def prices_by_model(result: DDMResult) -> dict[str, ModelPrice]:
    return {key: result.price(cfg["column"]) for key, cfg in MODEL_CONFIG.items()}


def _fmt_flow(v) -> str:
    # Negative flows (the year-0 outflow) are shown in parentheses.
    if v is None or not math.isfinite(v):
        return "Invalid"
    return f"(${abs(v):,.2f})" if v < 0 else f"${v:,.2f}"


def year_label(year: int) -> str:
    return "Initial Investment" if year == 0 else f"Year {year}"


def cash_flow_frame(result: DDMResult, selection: str = "all") -> pd.DataFrame:
    """
    Chart-ready cash flows: index is the integer year (0..horizon), one column per
    selected model name. Missing flows (undefined price) become NaN.
    """
    keys = selected_models(selection)
    frame = pd.DataFrame(
        {
            MODEL_CONFIG[key]["name"]: [getattr(row, MODEL_CONFIG[key]["column"]) for row in result.rows]
            for key in keys
        },
        index=[row.year for row in result.rows],
        dtype="float64",
    )
    frame.index.name = "Year"
    return frame


def format_rows(result: DDMResult, selection: str = "all") -> list[dict]:
    """
    Display-ready year-by-year rows.

    Year 0 is labelled "Initial Investment" and shows the outflow in
    parentheses. Flows of models with an undefined price read "Invalid".
    """
    keys = selected_models(selection)
    return [
        {
            "Year": year_label(row.year),
            **{
                MODEL_CONFIG[key]["name"]: _fmt_flow(getattr(row, MODEL_CONFIG[key]["column"]))
                for key in keys
            },
        }
        for row in result.rows
    ]


def value_breakdown_frame(result: DDMResult) -> pd.DataFrame | None:
    """Two-stage price split into PV of high-growth dividends and PV of terminal value."""
    if result.breakdown is None:
        return None
    return pd.DataFrame({
        "Component": ["PV of High-Growth Dividends", "PV of Terminal Value (TV)"],
        "Value ($)": [result.breakdown.pv_high_growth, result.breakdown.pv_terminal],
    }).set_index("Component")
