import math


def fmt_usd(v):
    return f"-${abs(v):,.2f}" if v < 0 else f"${v:,.2f}"


def fmt_pct(v):
    return f"{v * 100:.1f}%" if v is not None else "N/A"


def fmt_price(price):
    """ModelPrice → "$X,XXX.XX", or "Invalid" when undefined or non-finite."""
    if not price.is_valid or not math.isfinite(price.value):
        return "Invalid"
    return fmt_usd(price.value)
