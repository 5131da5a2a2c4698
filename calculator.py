"""Impact calculator: footfall + tile parameters -> energy and payback estimates."""

import logging
import math
from typing import Optional

import numpy as np
import pandas as pd
from pydantic import BaseModel, ConfigDict, Field

from config import COST_PER_SQFT, DAYS_PER_MONTH, JOULES_PER_KWH, SLIDERS, bounds, default

logger = logging.getLogger(__name__)


def _field(key: str):
    lo, hi = bounds(key)
    return Field(default=default(key), ge=lo, le=hi, description=SLIDERS[key][0])


class CalculatorInputs(BaseModel):
    """Slider values. Construction rejects anything outside the control ranges."""

    area_sqft: float = _field("area_sqft")
    daily_traffic: float = _field("daily_traffic")
    steps_per_person: float = _field("steps_per_person")
    joules_per_step: float = _field("joules_per_step")
    efficiency: float = _field("efficiency")
    tariff: float = _field("tariff")


class ImpactResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    capex: float
    raw_joules_per_day: float
    net_joules_per_day: float
    kwh_per_day: float
    kwh_per_month: float
    savings_per_day: float
    savings_per_month: float
    payback_months: Optional[float] = None  # None: savings are zero, payback never reached

    @property
    def payback_available(self) -> bool:
        return self.payback_months is not None


def compute_impact(area_sqft: float,
                   daily_traffic: float,
                   steps_per_person: float,
                   joules_per_step: float,
                   efficiency: float,
                   tariff: float,
                   cost_per_sqft: float = COST_PER_SQFT) -> ImpactResult:
    """
    CapEx = area * cost/sq ft
    Energy (kWh/day) = traffic * steps * J/step * efficiency / 3,600,000
    Savings = kWh * tariff; payback (months) = CapEx / monthly savings

    No validation here: callers with bounded controls never pass bad values,
    and zero savings gives payback_months=None instead of a division error.
    """
    capex = area_sqft * cost_per_sqft
    raw_j = daily_traffic * steps_per_person * joules_per_step
    net_j = raw_j * efficiency
    kwh_day = net_j / JOULES_PER_KWH
    kwh_month = kwh_day * DAYS_PER_MONTH
    savings_day = kwh_day * tariff
    savings_month = kwh_month * tariff

    payback = capex / savings_month if savings_month > 0 else None
    if payback is not None and not math.isfinite(payback):
        payback = None

    return ImpactResult(
        capex=capex,
        raw_joules_per_day=raw_j,
        net_joules_per_day=net_j,
        kwh_per_day=kwh_day,
        kwh_per_month=kwh_month,
        savings_per_day=savings_day,
        savings_per_month=savings_month,
        payback_months=payback,
    )


def calculate(inputs: CalculatorInputs) -> ImpactResult:
    result = compute_impact(**inputs.model_dump())
    logger.debug("Recomputed impact for %s -> %s", inputs, result)
    return result


def clamp_inputs(values: dict) -> CalculatorInputs:
    """
    Clip each value into its control range. Missing keys, and values that are
    not finite numbers (None, NaN, text), take the slider default.
    """
    clamped = {}
    for key in SLIDERS:
        lo, hi = bounds(key)
        try:
            raw = float(values.get(key, default(key)))
        except (TypeError, ValueError):
            raw = math.nan
        if not math.isfinite(raw):
            logger.warning("Ignoring non-numeric %s=%r, using default", key, values.get(key))
            raw = float(default(key))
        val = float(np.clip(raw, lo, hi))
        if val != raw:
            logger.warning("Clamped %s from %s to %s", key, raw, val)
        clamped[key] = val
    return CalculatorInputs(**clamped)


def build_result_export(inputs: CalculatorInputs, result: ImpactResult) -> pd.DataFrame:
    rows = []
    for k, v in inputs.model_dump().items():
        rows.append({"type": "assumption", "key": k, "value": v})
    rows.append({"type": "assumption", "key": "cost_per_sqft", "value": COST_PER_SQFT})
    for k, v in result.model_dump().items():
        rows.append({"type": "result", "key": k, "value": v})
    return pd.DataFrame(rows)
