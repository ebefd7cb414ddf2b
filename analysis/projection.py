"""Year-by-year buy vs. rent projection and breakeven detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

import pandas as pd

from .models import ProjectionYear


@dataclass(frozen=True)
class ProjectionInputs:
    years: int
    upfront_costs: float
    net_monthly_buying_cost: float
    net_monthly_rent: float
    monthly_principal: float
    initial_principal: float
    initial_property_value: float
    appreciation_rate_pct: float
    selling_costs_pct: float


@dataclass(frozen=True)
class Projection:
    years: tuple[ProjectionYear, ...]
    breakeven_point: Optional[int]
    investment_breakeven_point: Optional[int]

    @property
    def final_year(self) -> Optional[ProjectionYear]:
        return self.years[-1] if self.years else None


def project_years(params: ProjectionInputs) -> Projection:
    """
    Walk the stay one year at a time.

    Each year adds twelve months of net cash flow on both sides, pays down
    principal by twelve flat first-month principal payments, appreciates the
    property, then records what a sale at year end would return. Both
    breakeven markers keep the first year that satisfies them.
    """
    snapshots: List[ProjectionYear] = []
    breakeven: Optional[int] = None
    investment_breakeven: Optional[int] = None

    annual_buying = params.net_monthly_buying_cost * 12
    annual_renting = params.net_monthly_rent * 12
    annual_principal = params.monthly_principal * 12
    growth = 1 + params.appreciation_rate_pct / 100.0
    selling_share = params.selling_costs_pct / 100.0

    cumulative_buying = params.upfront_costs
    cumulative_renting = 0.0
    remaining_principal = params.initial_principal
    property_value = params.initial_property_value

    for year in range(1, params.years + 1):
        cumulative_buying += annual_buying
        cumulative_renting += annual_renting

        remaining_principal = max(0.0, remaining_principal - annual_principal)
        property_value *= growth

        net_worth_in_home = property_value - remaining_principal
        realized = net_worth_in_home - property_value * selling_share
        net_ownership_cost = cumulative_buying - realized

        snapshots.append(ProjectionYear(
            year=year,
            cumulative_buying_cost=cumulative_buying,
            cumulative_renting_cost=cumulative_renting,
            property_value=property_value,
            remaining_principal=remaining_principal,
            accumulated_equity=max(0.0, net_worth_in_home),
            realized_value_on_sale=realized,
            total_net_ownership_cost=net_ownership_cost,
        ))

        if breakeven is None and net_ownership_cost < cumulative_renting:
            breakeven = year
        if investment_breakeven is None and net_ownership_cost <= 0:
            investment_breakeven = year

    return Projection(
        years=tuple(snapshots),
        breakeven_point=breakeven,
        investment_breakeven_point=investment_breakeven,
    )


def projection_frame(projection: Sequence[ProjectionYear]) -> pd.DataFrame:
    """Projection as a DataFrame indexed by year, for tables and charts."""
    columns = [
        "Year",
        "Cumulative Buying Cost",
        "Cumulative Renting Cost",
        "Net Ownership Cost",
        "Property Value",
        "Remaining Principal",
        "Equity",
        "Realized Value On Sale",
    ]
    rows = [
        {
            "Year": p.year,
            "Cumulative Buying Cost": p.cumulative_buying_cost,
            "Cumulative Renting Cost": p.cumulative_renting_cost,
            "Net Ownership Cost": p.total_net_ownership_cost,
            "Property Value": p.property_value,
            "Remaining Principal": p.remaining_principal,
            "Equity": p.accumulated_equity,
            "Realized Value On Sale": p.realized_value_on_sale,
        }
        for p in projection
    ]
    return pd.DataFrame(rows, columns=columns).set_index("Year")
