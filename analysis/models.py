from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class EmploymentStatus(Enum):
    EMPLOYED = "employed"
    SELF_EMPLOYED = "self-employed"
    OTHER = "other"


class HouseholdSize(Enum):
    SINGLE = "single"
    COUPLE = "couple"


class ContractViolation(TypeError):
    """Raised when the engine is handed something other than a validated profile."""


@dataclass(frozen=True)
class InputProfile:
    # Personal
    age: float
    annual_income: float
    employment_status: EmploymentStatus
    household_size: Optional[HouseholdSize]

    # Financial (monthly rent, financed principal)
    savings: float
    current_rental_expenses: float
    max_mortgage: float
    overbid_amount: float

    # Percentages as entered (4.1 = 4.1%)
    interest_rate: float
    marginal_tax_rate: float
    property_transfer_tax_percentage: float
    other_upfront_costs_percentage: float
    maintenance_percentage: float
    property_appreciation_rate: float
    estimated_selling_costs_percentage: float

    # Flags
    is_first_time_buyer: bool
    mid_eligible: bool
    is_eligible_for_huurtoeslag: bool

    intended_length_of_stay: int

    def to_record(self) -> dict:
        """Flat record with plain values, suitable for JSON and for re-validation."""
        return {
            "age": self.age,
            "annual_income": self.annual_income,
            "employment_status": self.employment_status.value,
            "household_size": self.household_size.value if self.household_size else None,
            "savings": self.savings,
            "current_rental_expenses": self.current_rental_expenses,
            "max_mortgage": self.max_mortgage,
            "overbid_amount": self.overbid_amount,
            "interest_rate": self.interest_rate,
            "marginal_tax_rate": self.marginal_tax_rate,
            "property_transfer_tax_percentage": self.property_transfer_tax_percentage,
            "other_upfront_costs_percentage": self.other_upfront_costs_percentage,
            "maintenance_percentage": self.maintenance_percentage,
            "property_appreciation_rate": self.property_appreciation_rate,
            "estimated_selling_costs_percentage": self.estimated_selling_costs_percentage,
            "is_first_time_buyer": self.is_first_time_buyer,
            "mid_eligible": self.mid_eligible,
            "is_eligible_for_huurtoeslag": self.is_eligible_for_huurtoeslag,
            "intended_length_of_stay": self.intended_length_of_stay,
        }


@dataclass(frozen=True)
class ProjectionYear:
    year: int
    cumulative_buying_cost: float
    cumulative_renting_cost: float
    property_value: float
    remaining_principal: float
    accumulated_equity: float
    realized_value_on_sale: float
    # Cumulative buying cash minus what a sale would return this year
    total_net_ownership_cost: float


@dataclass(frozen=True)
class AnalysisResult:
    # Mortgage (P&I)
    gross_monthly_mortgage: float
    monthly_interest: float
    monthly_principal: float

    # Upfront
    estimated_sale_price: float
    transfer_tax_cost: float
    transfer_tax_waived: bool
    other_upfront_costs: float
    total_upfront_costs: float
    remaining_savings: float

    # Monthly
    monthly_maintenance: float
    monthly_tax_benefit: float
    monthly_ewf_cost: float
    total_net_monthly_buying_cost: float
    monthly_cost_differential: float
    current_rental_expenses: float
    huurtoeslag_amount: float
    net_monthly_rental_cost: float
    monthly_equity_accumulation: float

    # Long-term projection
    projection: Tuple[ProjectionYear, ...]
    breakeven_point: Optional[int]
    investment_breakeven_point: Optional[int]
    realized_value_on_sale: float

    inputs: InputProfile

    def verdict(self) -> str:
        if self.breakeven_point is not None:
            return f"Buying becomes the cheaper option in Year {self.breakeven_point}."
        stay = self.inputs.intended_length_of_stay
        return f"Renting is the cheaper option for your {stay}-year timeline."
