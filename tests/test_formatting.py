"""
Display formatting tests: en-IN grouping, currency, payback placeholder, result cards.
"""

import pytest

from calculator import CalculatorInputs, calculate, compute_impact
from formatting import currency, num, payback_text, stat_cards


@pytest.mark.parametrize("value,decimals,expected", [
    (0, 0, "0"),
    (999, 0, "999"),
    (55000, 0, "55,000"),
    (100000, 0, "1,00,000"),
    (1234567.891, 2, "12,34,567.89"),
    (0.0093333, 3, "0.009"),
    (-1500, 0, "-1,500"),
    (-0.0001, 2, "0.00"),
])
def test_num_groups_en_in(value, decimals, expected):
    assert num(value, decimals) == expected


def test_currency_rounds_to_whole_rupees():
    assert currency(55000) == "₹55,000"
    assert currency(2.24) == "₹2"
    assert currency(0.0747) == "₹0"


def test_payback_text_numeric():
    assert payback_text(24553.57) == "24,553.6 months"


@pytest.mark.parametrize("months", [None, float("inf")])
def test_payback_text_placeholder(months):
    text = payback_text(months)
    assert text == "— months"
    assert "inf" not in text.lower()


def test_stat_cards_default_scenario():
    inputs = CalculatorInputs()
    cards = dict((title, (value, sub)) for title, value, sub in stat_cards(inputs, calculate(inputs)))
    assert cards["CapEx (Tiles Only)"] == ("₹55,000", "@ ₹110/sq ft for 500 sq ft")
    assert cards["Daily Energy"] == ("0.009 kWh", "33,600 J net")
    assert cards["Monthly Energy"] == ("0.28 kWh", "0.009 kWh/day")
    assert cards["Daily Savings"][0] == "₹0"
    assert cards["Monthly Savings"] == ("₹2", "≈ 0.28 kWh")
    assert cards["Simple Payback"] == ("24,553.6 months", "(tiles cost only)")


def test_stat_cards_zero_savings_uses_placeholder():
    inputs = CalculatorInputs()
    result = compute_impact(500, 8000, 4, 1.5, 0.7, tariff=0)
    payback = [value for title, value, _ in stat_cards(inputs, result) if title == "Simple Payback"]
    assert payback == ["— months"]


@pytest.mark.parametrize("value,decimals,expected", [
    (12.5, 0, "13"),
    (0.5, 0, "1"),
    (0.125, 2, "0.13"),
    (24553.25, 1, "24,553.3"),
])
def test_num_rounds_ties_away_from_zero(value, decimals, expected):
    assert num(value, decimals) == expected


def test_daily_savings_tie_rounds_up():
    inputs = CalculatorInputs(daily_traffic=100000, steps_per_person=20,
                              joules_per_step=5.0, efficiency=0.9, tariff=5.0)
    result = calculate(inputs)
    assert result.savings_per_day == 12.5
    cards = {title: value for title, value, _ in stat_cards(inputs, result)}
    assert cards["Daily Savings"] == "₹13"
