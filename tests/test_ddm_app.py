"""Application layer tests: percentage inputs, model catalogue, chart and table shaping."""

import math

import pytest

from apps.ddm_app import (
    MODEL_CONFIG,
    MODEL_SELECTIONS,
    _fmt_flow,
    cash_flow_frame,
    format_rows,
    prices_by_model,
    run_ddm,
    selected_models,
    value_breakdown_frame,
)
from models.ddm_model import InputError


def _default_run(**overrides):
    params = dict(d0=5, required_pct=10, g_const_pct=5, g_short_pct=5, g_long_pct=3, short_years=5)
    params.update(overrides)
    return run_ddm(**params)


def test_run_ddm_converts_percentages():
    result = _default_run()
    assert result.no_growth.value == pytest.approx(50.0)
    assert result.constant_growth.value == pytest.approx(105.0)
    assert not result.has_errors


def test_run_ddm_reports_validation_errors():
    result = _default_run(g_const_pct=12)
    assert result.errors == {"g_const": "Growth rate must be less than required return"}


def test_run_ddm_rejects_fractional_years():
    with pytest.raises(InputError):
        _default_run(short_years=2.5)


def test_model_selections():
    assert MODEL_SELECTIONS == ("all", "constant", "growth", "changing")
    assert selected_models("all") == ["constant", "growth", "changing"]
    assert selected_models("growth") == ["growth"]
    with pytest.raises(ValueError):
        selected_models("three-stage")


def test_prices_by_model_maps_keys_to_engine_prices():
    result = _default_run()
    prices = prices_by_model(result)
    assert prices["constant"] is result.no_growth
    assert prices["growth"] is result.constant_growth
    assert prices["changing"] is result.two_stage


def test_cash_flow_frame_shape_and_sign():
    result = _default_run()
    frame = cash_flow_frame(result)
    assert list(frame.index) == list(range(11))
    assert list(frame.columns) == [cfg["name"] for cfg in MODEL_CONFIG.values()]
    assert frame.loc[0, "Constant Dividend Model"] == pytest.approx(-50.0)
    assert frame.loc[1, "Constant Growth Model"] == pytest.approx(5.25)


def test_cash_flow_frame_single_model():
    frame = cash_flow_frame(_default_run(), "changing")
    assert list(frame.columns) == ["Changing Growth Model"]


def test_cash_flow_frame_undefined_model_is_nan():
    frame = cash_flow_frame(_default_run(required_pct=5, g_const_pct=5, g_long_pct=3))
    assert frame["Constant Growth Model"].isna().all()
    assert not frame["Constant Dividend Model"].isna().any()


def test_format_rows():
    rows = format_rows(_default_run(), "growth")
    assert len(rows) == 11
    assert rows[0] == {"Year": "Initial Investment", "Constant Growth Model": "($105.00)"}
    assert rows[1] == {"Year": "Year 1", "Constant Growth Model": "$5.25"}


def test_format_rows_marks_undefined_as_invalid():
    rows = format_rows(_default_run(required_pct=5, g_const_pct=5, g_long_pct=3), "growth")
    assert {row["Constant Growth Model"] for row in rows} == {"Invalid"}


def test_value_breakdown_frame():
    result = _default_run(short_years=1)
    frame = value_breakdown_frame(result)
    assert frame["Value ($)"].sum() == pytest.approx(75.0)


def test_value_breakdown_frame_none_when_two_stage_undefined():
    assert value_breakdown_frame(_default_run(g_short_pct=-1)) is None


def test_invalid_price_surfaces_as_nan_for_legacy_callers():
    result = _default_run(required_pct=0)
    assert math.isnan(result.no_growth.as_float())


def test_format_rows_thousands_separator_and_outflow_parentheses():
    rows = format_rows(_default_run(d0=100, required_pct=5, g_const_pct=0, g_long_pct=0), "growth")
    assert rows[0]["Constant Growth Model"] == "($2,000.00)"
    assert rows[10]["Constant Growth Model"] == "$100.00"


def test_flow_cell_formatting():
    assert _fmt_flow(-1234.5) == "($1,234.50)"
    assert _fmt_flow(math.inf) == "Invalid"
