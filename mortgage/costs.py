from __future__ import annotations

from dataclasses import dataclass

from config.rules import DEFAULT_RULES, TaxRules


@dataclass(frozen=True)
class UpfrontCosts:
    transfer_tax: float
    transfer_tax_waived: bool
    other_costs: float
    overbid: float

    @property
    def total(self) -> float:
        return self.transfer_tax + self.other_costs + self.overbid


@dataclass(frozen=True)
class MonthlyOwnershipCosts:
    mortgage_payment: float
    maintenance: float
    tax_benefit: float
    ewf: float

    @property
    def gross(self) -> float:
        return self.mortgage_payment + self.maintenance

    @property
    def net(self) -> float:
        return self.gross - self.tax_benefit + self.ewf


def is_transfer_tax_waived(is_first_time_buyer: bool, age: float, rules: TaxRules = DEFAULT_RULES) -> bool:
    return bool(is_first_time_buyer) and age < rules.waiver_age_limit


def compute_upfront_costs(
    property_value: float,
    transfer_tax_pct: float,
    other_costs_pct: float,
    overbid_amount: float,
    is_first_time_buyer: bool,
    age: float,
    rules: TaxRules = DEFAULT_RULES,
) -> UpfrontCosts:
    """
    One-time cash due at purchase. The overbid sits outside the mortgaged
    value and is paid from savings in full.
    """
    waived = is_transfer_tax_waived(is_first_time_buyer, age, rules)
    transfer_tax = 0.0 if waived else property_value * (transfer_tax_pct / 100.0)
    other_costs = property_value * (other_costs_pct / 100.0)
    return UpfrontCosts(
        transfer_tax=transfer_tax,
        transfer_tax_waived=waived,
        other_costs=other_costs,
        overbid=overbid_amount or 0.0,
    )


def mortgage_interest_benefit(monthly_interest: float, marginal_tax_rate_pct: float, mid_eligible: bool) -> float:
    if not mid_eligible or monthly_interest <= 0:
        return 0.0
    return monthly_interest * (marginal_tax_rate_pct / 100.0)


def compute_costs_monthly(
    property_value: float,
    mortgage_payment: float,
    monthly_interest: float,
    maintenance_pct: float,
    marginal_tax_rate_pct: float,
    mid_eligible: bool,
    rules: TaxRules = DEFAULT_RULES,
) -> MonthlyOwnershipCosts:
    """
    Recurring monthly cost of owning. EWF is based on the assessed value
    (not the price paid including overbid) and is always charged.
    """
    maintenance = property_value * (maintenance_pct / 100.0) / 12.0
    ewf = property_value * rules.ewf_rate / 12.0
    benefit = mortgage_interest_benefit(monthly_interest, marginal_tax_rate_pct, mid_eligible)
    return MonthlyOwnershipCosts(
        mortgage_payment=mortgage_payment,
        maintenance=maintenance,
        tax_benefit=benefit,
        ewf=ewf,
    )
