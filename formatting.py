import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from config import COST_PER_SQFT, settings

PLACEHOLDER = "—"


def _group_en_in(digits: str) -> str:
    # Indian grouping: last three digits, then pairs (12,34,567)
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def num(n: float, decimals: int = 0) -> str:
    # ties round away from zero (12.5 -> 13)
    q = Decimal(repr(abs(n))).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    s = f"{q:f}"
    whole, _, frac = s.partition(".")
    out = _group_en_in(whole)
    if frac:
        out = f"{out}.{frac}"
    if n < 0 and s.strip("0.") != "":
        out = "-" + out
    return out


def currency(n: float) -> str:
    return f"{settings.CURRENCY_SYMBOL}{num(n)}"


def payback_text(months: Optional[float]) -> str:
    if months is None or not math.isfinite(months):
        return f"{PLACEHOLDER} months"
    return f"{num(months, 1)} months"


def stat_cards(inputs, result) -> list[tuple[str, str, str]]:
    """(title, value, subtitle) for each result card."""
    cur = settings.CURRENCY_SYMBOL
    return [
        ("CapEx (Tiles Only)", currency(result.capex),
         f"@ {cur}{num(COST_PER_SQFT)}/sq ft for {num(inputs.area_sqft)} sq ft"),
        ("Daily Energy", f"{num(result.kwh_per_day, 3)} kWh",
         f"{num(result.net_joules_per_day, 0)} J net"),
        ("Monthly Energy", f"{num(result.kwh_per_month, 2)} kWh",
         f"{num(result.kwh_per_day, 3)} kWh/day"),
        ("Daily Savings", currency(result.savings_per_day),
         f"@ {cur}{num(inputs.tariff, 1)}/kWh"),
        ("Monthly Savings", currency(result.savings_per_month),
         f"≈ {num(result.kwh_per_month, 2)} kWh"),
        ("Simple Payback", payback_text(result.payback_months), "(tiles cost only)"),
    ]
