"""Rent vs. buy engine: validated profile in, full analysis out."""

from __future__ import annotations

import logging

from config.rules import DEFAULT_RULES, TaxRules
from mortgage.calculations import first_month_split
from mortgage.costs import compute_costs_monthly, compute_upfront_costs

from .models import AnalysisResult, ContractViolation, InputProfile
from .projection import ProjectionInputs, project_years
from .rent import net_monthly_rent, rent_subsidy

logger = logging.getLogger(__name__)


def compute(profile: InputProfile, rules: TaxRules = DEFAULT_RULES) -> AnalysisResult:
    """
    Run the full analysis for one profile.

    The profile must come from ``analysis.validation.validate``; ranges are
    not checked again here.
    """
    if not isinstance(profile, InputProfile):
        raise ContractViolation(
            f"compute() expects an InputProfile, got {type(profile).__name__}"
        )

    # The mortgaged value is the property's assessed value; overbid is cash.
    principal = profile.max_mortgage
    property_value = profile.max_mortgage

    split = first_month_split(principal, profile.interest_rate, rules.mortgage_term_years)

    upfront = compute_upfront_costs(
        property_value=property_value,
        transfer_tax_pct=profile.property_transfer_tax_percentage,
        other_costs_pct=profile.other_upfront_costs_percentage,
        overbid_amount=profile.overbid_amount,
        is_first_time_buyer=profile.is_first_time_buyer,
        age=profile.age,
        rules=rules,
    )

    monthly = compute_costs_monthly(
        property_value=property_value,
        mortgage_payment=split.payment,
        monthly_interest=split.interest,
        maintenance_pct=profile.maintenance_percentage,
        marginal_tax_rate_pct=profile.marginal_tax_rate,
        mid_eligible=profile.mid_eligible,
        rules=rules,
    )

    subsidy = rent_subsidy(
        eligible=profile.is_eligible_for_huurtoeslag,
        income=profile.annual_income,
        rent=profile.current_rental_expenses,
        household=profile.household_size,
        rules=rules,
    )
    net_rent = net_monthly_rent(profile.current_rental_expenses, subsidy)

    projection = project_years(ProjectionInputs(
        years=profile.intended_length_of_stay,
        upfront_costs=upfront.total,
        net_monthly_buying_cost=monthly.net,
        net_monthly_rent=net_rent,
        monthly_principal=split.principal,
        initial_principal=principal,
        initial_property_value=property_value,
        appreciation_rate_pct=profile.property_appreciation_rate,
        selling_costs_pct=profile.estimated_selling_costs_percentage,
    ))

    final = projection.final_year
    realized_value_on_sale = final.realized_value_on_sale if final else 0.0

    logger.debug(
        "Computed %d-year projection: breakeven=%s investment_breakeven=%s",
        profile.intended_length_of_stay,
        projection.breakeven_point,
        projection.investment_breakeven_point,
    )

    return AnalysisResult(
        gross_monthly_mortgage=split.payment,
        monthly_interest=split.interest,
        monthly_principal=split.principal,
        estimated_sale_price=property_value,
        transfer_tax_cost=upfront.transfer_tax,
        transfer_tax_waived=upfront.transfer_tax_waived,
        other_upfront_costs=upfront.other_costs,
        total_upfront_costs=upfront.total,
        remaining_savings=profile.savings - upfront.total,
        monthly_maintenance=monthly.maintenance,
        monthly_tax_benefit=monthly.tax_benefit,
        monthly_ewf_cost=monthly.ewf,
        total_net_monthly_buying_cost=monthly.net,
        monthly_cost_differential=monthly.net - profile.current_rental_expenses,
        current_rental_expenses=profile.current_rental_expenses,
        huurtoeslag_amount=subsidy,
        net_monthly_rental_cost=net_rent,
        monthly_equity_accumulation=split.principal,
        projection=projection.years,
        breakeven_point=projection.breakeven_point,
        investment_breakeven_point=projection.investment_breakeven_point,
        realized_value_on_sale=realized_value_on_sale,
        inputs=profile,
    )
