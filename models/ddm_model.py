"""
Core Dividend Discount Model (DDM) engine.

Three models price a share as the present value of its expected dividends:

    No-Growth        P = D₀ / r
    Constant Growth  P = D₀ × (1 + g) / (r − g)                       (Gordon Growth)
    Two-Stage        P = Σ_{t=1}^{n} D₀(1 + g_s)^t / (1 + r)^t  +  TV / (1 + r)^n
                     TV = D₀(1 + g_s)^n × (1 + g_l) / (r − g_l)

Key Inputs:
+-----------------------------+-------------------------------------------------------+
| Symbol / Field              | Description                                           |
+-----------------------------+-------------------------------------------------------+
| D₀   d0                     | Most recent dividend per share                        |
| r    required               | Required rate of return (decimal, 0.10 = 10%)         |
| g    g_const                | Constant growth rate (Gordon Growth)                  |
| g_s  g_short                | High growth rate, first `short_years` years           |
| g_l  g_long                 | Sustainable growth rate after the high-growth phase   |
| n    short_years            | Number of high-growth years                           |
+-----------------------------+-------------------------------------------------------+

Validation is advisory: constraint violations are reported as field-keyed
messages and never stop the computation. A model whose price is undefined
for the given inputs returns ModelPrice.undefined(...) instead of raising.
"""

import logging
import math
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

HORIZON_YEARS = 10
MAX_YEARS = 200  # upper bound for short_years and horizon_years

NO_GROWTH = "no_growth"
CONSTANT_GROWTH = "constant_growth"
TWO_STAGE = "two_stage"
MODELS = (NO_GROWTH, CONSTANT_GROWTH, TWO_STAGE)


class InputError(ValueError):
    pass


@dataclass(frozen=True)
class DDMInputs:
    """Immutable DDM inputs. Rates are decimal fractions."""
    d0:            float = 5.0    # most recent dividend per share ($)
    required:      float = 0.10   # required rate of return
    g_const:       float = 0.05   # constant growth rate
    g_short:       float = 0.05   # high growth rate (two-stage)
    g_long:        float = 0.03   # long-term growth rate (two-stage)
    short_years:   int = 5        # high-growth years (two-stage)
    horizon_years: int = HORIZON_YEARS

    def __post_init__(self):
        for name in ("d0", "required", "g_const", "g_short", "g_long"):
            object.__setattr__(self, name, _to_float(name, getattr(self, name)))
        for name in ("short_years", "horizon_years"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InputError(f"{name} must be an integer, got {value!r}")
        if not 0 <= self.short_years <= MAX_YEARS:
            raise InputError(f"short_years must be between 0 and {MAX_YEARS}")
        if not 1 <= self.horizon_years <= MAX_YEARS:
            raise InputError(f"horizon_years must be between 1 and {MAX_YEARS}")


def _to_float(name: str, value) -> float:
    # Ints beyond float range saturate to ±inf; the affected prices become undefined.
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
    except (TypeError, ValueError):
        raise InputError(f"{name} must be a number, got {value!r}") from None


@dataclass(frozen=True)
class ModelPrice:
    """Either a valid price or an undefined one carrying the reason."""
    value:  float | None
    reason: str | None = None

    @classmethod
    def valid(cls, value: float) -> "ModelPrice":
        return cls(value=value)

    @classmethod
    def undefined(cls, reason: str) -> "ModelPrice":
        return cls(value=None, reason=reason)

    @property
    def is_valid(self) -> bool:
        return self.value is not None

    def as_float(self) -> float:
        """The price, or NaN when undefined."""
        return self.value if self.value is not None else math.nan


@dataclass(frozen=True)
class TwoStageBreakdown:
    """Components of the two-stage price. All values in dollars per share."""
    pv_high_growth:    float  # PV of dividends in years 1..n
    terminal_dividend: float  # D₀(1 + g_s)^n × (1 + g_l)
    terminal_value:    float  # value at year n of all later dividends
    pv_terminal:       float  # terminal_value / (1 + r)^n


@dataclass(frozen=True)
class CashFlowRow:
    """One projection year. Year 0 is the negated price (initial outflow)."""
    year:            int
    no_growth:       float | None
    constant_growth: float | None
    two_stage:       float | None


@dataclass(frozen=True)
class DDMResult:
    no_growth:       ModelPrice
    constant_growth: ModelPrice
    two_stage:       ModelPrice
    rows:            tuple[CashFlowRow, ...]
    errors:          dict[str, str] = field(default_factory=dict)
    breakdown:       TwoStageBreakdown | None = None

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def price(self, model: str) -> ModelPrice:
        if model not in MODELS:
            raise ValueError(f"Unknown model '{model}'.")
        return getattr(self, model)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _compound(rate: float, years: int) -> float:
    """(1 + rate)^years, saturating to inf instead of raising OverflowError."""
    try:
        return (1 + rate) ** years
    except OverflowError:
        return math.inf


def _finite(value: float) -> ModelPrice:
    if math.isfinite(value):
        return ModelPrice.valid(value)
    return ModelPrice.undefined("Price is not a finite number for these inputs.")


# ── Validation ────────────────────────────────────────────────────────────────

def validate_inputs(inputs: DDMInputs) -> dict[str, str]:
    """
    Advisory input checks. Every violated constraint adds one entry; an empty
    dict means all constraints hold.
    """
    errors = {}
    if inputs.g_const >= inputs.required:
        errors["g_const"] = "Growth rate must be less than required return"
    if inputs.g_long >= inputs.required:
        errors["g_long"] = "Long-term growth must be less than required return"
    if inputs.d0 <= 0:
        errors["d0"] = "Dividend must be positive"
    if inputs.required <= 0:
        errors["required"] = "Required return must be positive"
    return errors


# ── Models ────────────────────────────────────────────────────────────────────

def price_no_growth(inputs: DDMInputs) -> ModelPrice:
    """Perpetuity of a constant dividend: P = D₀ / r."""
    if not inputs.required > 0:
        return ModelPrice.undefined("Required return must be positive.")
    return _finite(inputs.d0 / inputs.required)


def price_constant_growth(inputs: DDMInputs) -> ModelPrice:
    """Gordon Growth: P = D₀ × (1 + g) / (r − g), defined for 0 ≤ g < r."""
    g, r = inputs.g_const, inputs.required
    if not (0 <= g < r):
        return ModelPrice.undefined("Constant growth must satisfy 0 ≤ g < r.")
    return _finite(inputs.d0 * (1 + g) / (r - g))


def price_two_stage(inputs: DDMInputs) -> tuple[ModelPrice, TwoStageBreakdown | None]:
    """
    Two-stage growth: high growth g_short for short_years, then g_long forever.

    Defined for g_short ≥ 0 and 0 ≤ g_long < required.

    Returns:
        (price, breakdown) where breakdown is None when the price is undefined.
    """
    d0, r = inputs.d0, inputs.required
    g_s, g_l, n = inputs.g_short, inputs.g_long, inputs.short_years

    if not (g_s >= 0 and 0 <= g_l < r):
        return ModelPrice.undefined("Two-stage growth requires g_short ≥ 0 and 0 ≤ g_long < r."), None

    pv_high_growth = 0.0
    for t in range(1, n + 1):
        pv_high_growth += d0 * _compound(g_s, t) / _compound(r, t)

    terminal_dividend = d0 * _compound(g_s, n) * (1 + g_l)
    terminal_value = terminal_dividend / (r - g_l)
    pv_terminal = terminal_value / _compound(r, n)

    price = _finite(pv_high_growth + pv_terminal)
    if not price.is_valid:
        return price, None

    return price, TwoStageBreakdown(
        pv_high_growth=pv_high_growth,
        terminal_dividend=terminal_dividend,
        terminal_value=terminal_value,
        pv_terminal=pv_terminal,
    )


def projected_dividend(inputs: DDMInputs, model: str, year: int) -> float:
    """Dividend a model projects for `year` ≥ 1."""
    d0 = inputs.d0
    if model == NO_GROWTH:
        return d0
    if model == CONSTANT_GROWTH:
        return d0 * _compound(inputs.g_const, year)
    if model == TWO_STAGE:
        n = inputs.short_years
        if year <= n:
            return d0 * _compound(inputs.g_short, year)
        return d0 * _compound(inputs.g_short, n) * _compound(inputs.g_long, year - n)
    raise ValueError(f"Unknown model '{model}'.")


# ── Cash-flow series ──────────────────────────────────────────────────────────

def build_cash_flow_rows(
    inputs: DDMInputs,
    prices: dict[str, ModelPrice],
) -> tuple[CashFlowRow, ...]:
    """
    Year 0 holds each model's negated price; years 1..horizon_years hold the
    projected dividends. A model with an undefined price is None in every row.

    Returns:
        tuple of exactly horizon_years + 1 CashFlowRow.
    """
    rows = [CashFlowRow(
        year=0,
        **{m: -prices[m].value if prices[m].is_valid else None for m in MODELS},
    )]
    for year in range(1, inputs.horizon_years + 1):
        rows.append(CashFlowRow(
            year=year,
            **{m: projected_dividend(inputs, m, year) if prices[m].is_valid else None for m in MODELS},
        ))
    return tuple(rows)


def compute(inputs: DDMInputs) -> DDMResult:
    """
    Validates inputs, prices all three models and builds the cash-flow series.

    Never raises for numeric inputs: undefined prices are ModelPrice.undefined
    and their cash-flow columns are None.
    """
    errors = validate_inputs(inputs)
    two_stage, breakdown = price_two_stage(inputs)
    prices = {
        NO_GROWTH: price_no_growth(inputs),
        CONSTANT_GROWTH: price_constant_growth(inputs),
        TWO_STAGE: two_stage,
    }

    logger.debug("DDM compute: inputs=%s errors=%s", inputs, sorted(errors))
    for model, price in prices.items():
        if not price.is_valid:
            logger.debug("DDM %s price undefined: %s", model, price.reason)

    return DDMResult(
        no_growth=prices[NO_GROWTH],
        constant_growth=prices[CONSTANT_GROWTH],
        two_stage=prices[TWO_STAGE],
        rows=build_cash_flow_rows(inputs, prices),
        errors=errors,
        breakdown=breakdown,
    )
