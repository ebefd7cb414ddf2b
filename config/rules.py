"""Statutory rates and thresholds used by the rent vs. buy engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TaxRules:
    # Mortgage
    mortgage_term_years: int = 30

    # Eigenwoningforfait, charged on the assessed value every year
    ewf_rate: float = 0.0035

    # Transfer tax waiver for young first-time buyers
    waiver_age_limit: float = 35

    # Huurtoeslag (rent subsidy)
    subsidy_income_limit_single: float = 30000.0
    subsidy_income_limit_couple: float = 38000.0
    subsidy_rent_limit: float = 808.0
    subsidy_base_rent: float = 250.0
    subsidy_share: float = 0.75
    subsidy_max: float = 350.0

    @property
    def mortgage_term_months(self) -> int:
        return self.mortgage_term_years * 12

    def subsidy_income_limit(self, household_size: str) -> float:
        if household_size == "couple":
            return self.subsidy_income_limit_couple
        return self.subsidy_income_limit_single


DEFAULT_RULES = TaxRules()
