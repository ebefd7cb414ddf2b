"""Shared fixtures.

Baseline household: single, 30 years old, renting at €1,500/month, looking at
a €300,000 mortgage at 4.1% over 30 years.
"""

import pytest

from analysis import validate


BASE_RECORD = {
    "age": 30,
    "annual_income": 60000,
    "employment_status": "employed",
    "household_size": "single",
    "savings": 40000,
    "current_rental_expenses": 1500,
    "max_mortgage": 300000,
    "overbid_amount": 0,
    "interest_rate": 4.1,
    "marginal_tax_rate": 37,
    "property_transfer_tax_percentage": 2,
    "other_upfront_costs_percentage": 3,
    "maintenance_percentage": 1,
    "property_appreciation_rate": 2,
    "estimated_selling_costs_percentage": 2,
    "is_first_time_buyer": False,
    "mid_eligible": True,
    "is_eligible_for_huurtoeslag": False,
    "intended_length_of_stay": 10,
}


@pytest.fixture
def raw_record() -> dict:
    return dict(BASE_RECORD)


@pytest.fixture
def make_profile():
    """Build a validated InputProfile from the baseline with overrides."""

    def _make(**overrides):
        record = dict(BASE_RECORD)
        record.update(overrides)
        outcome = validate(record)
        assert outcome.ok, outcome.errors
        return outcome.profile

    return _make
