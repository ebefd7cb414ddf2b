"""Rent-side costs: huurtoeslag (rent subsidy) and net monthly rent."""

from __future__ import annotations

from typing import Optional

from config.rules import DEFAULT_RULES, TaxRules

from .models import HouseholdSize


def calculate_huurtoeslag(
    income: float,
    rent: float,
    household: HouseholdSize,
    rules: TaxRules = DEFAULT_RULES,
) -> float:
    """
    Simplified monthly rent allowance.

    Zero above the income limit for the household or above the rent cap;
    otherwise (rent - base) * share scaled down linearly by income, capped.
    """
    income_limit = rules.subsidy_income_limit(household.value)
    if income > income_limit or rent > rules.subsidy_rent_limit:
        return 0.0

    income_ratio = 1 - (income / income_limit)
    potential = (rent - rules.subsidy_base_rent) * rules.subsidy_share
    subsidy = max(0.0, potential * income_ratio)
    return min(subsidy, rules.subsidy_max)


def rent_subsidy(
    eligible: bool,
    income: float,
    rent: float,
    household: Optional[HouseholdSize],
    rules: TaxRules = DEFAULT_RULES,
) -> float:
    if not eligible or household is None:
        return 0.0
    return calculate_huurtoeslag(income or 0.0, rent or 0.0, household, rules)


def net_monthly_rent(rent: float, subsidy: float) -> float:
    return rent - subsidy
