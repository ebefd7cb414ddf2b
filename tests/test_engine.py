import pytest

from analysis import AnalysisResult, ContractViolation, compute


def test_monthly_mortgage_figures(make_profile):
    result = compute(make_profile())
    assert result.gross_monthly_mortgage == pytest.approx(1449.60, abs=0.5)
    assert result.monthly_interest == pytest.approx(1025.00, abs=0.01)
    assert result.monthly_principal + result.monthly_interest == pytest.approx(result.gross_monthly_mortgage)
    assert result.monthly_equity_accumulation == result.monthly_principal


@pytest.mark.parametrize(
    "overrides",
    [
        {},
        {"mid_eligible": False},
        {"interest_rate": 0},
        {"maintenance_percentage": 4, "marginal_tax_rate": 49.5},
        {"max_mortgage": 150000, "interest_rate": 7.25},
    ],
)
def test_net_buying_cost_identity(make_profile, overrides):
    r = compute(make_profile(**overrides))
    assert r.total_net_monthly_buying_cost == pytest.approx(
        r.gross_monthly_mortgage + r.monthly_maintenance - r.monthly_tax_benefit + r.monthly_ewf_cost
    )
    assert r.monthly_principal + r.monthly_interest == pytest.approx(r.gross_monthly_mortgage)


def test_zero_interest(make_profile):
    result = compute(make_profile(interest_rate=0))
    assert result.gross_monthly_mortgage == 300000 / 360
    assert result.monthly_interest == 0.0
    assert result.monthly_tax_benefit == 0.0


def test_upfront_and_monthly_breakdown(make_profile):
    result = compute(make_profile(overbid_amount=25000))
    assert result.estimated_sale_price == 300000
    assert result.transfer_tax_cost == pytest.approx(6000.0)
    assert not result.transfer_tax_waived
    assert result.other_upfront_costs == pytest.approx(9000.0)
    assert result.total_upfront_costs == pytest.approx(40000.0)
    assert result.remaining_savings == pytest.approx(0.0, abs=1e-6)
    assert result.monthly_maintenance == pytest.approx(250.0)
    assert result.monthly_ewf_cost == pytest.approx(87.5)
    assert result.monthly_tax_benefit == pytest.approx(379.25)
    assert result.monthly_cost_differential == pytest.approx(result.total_net_monthly_buying_cost - 1500)


def test_transfer_tax_waiver_age_boundary(make_profile):
    young = compute(make_profile(is_first_time_buyer=True, age=34))
    assert young.transfer_tax_cost == 0
    assert young.transfer_tax_waived

    older = compute(make_profile(is_first_time_buyer=True, age=35))
    assert older.transfer_tax_cost == pytest.approx(300000 * 0.02)


def test_no_subsidy_above_rent_cap(make_profile):
    result = compute(make_profile(is_eligible_for_huurtoeslag=True, annual_income=60000, current_rental_expenses=1500))
    assert result.huurtoeslag_amount == 0
    assert result.net_monthly_rental_cost == 1500


def test_subsidy_reduces_rent(make_profile):
    result = compute(make_profile(is_eligible_for_huurtoeslag=True, annual_income=20000, current_rental_expenses=700))
    assert result.huurtoeslag_amount == pytest.approx(112.5)
    assert result.net_monthly_rental_cost == pytest.approx(587.5)
    assert result.current_rental_expenses == 700
    assert result.projection[0].cumulative_renting_cost == pytest.approx(587.5 * 12)


def test_projection_first_year(make_profile):
    result = compute(make_profile())
    first = result.projection[0]
    assert first.year == 1
    assert first.cumulative_buying_cost == pytest.approx(
        result.total_upfront_costs + 12 * result.total_net_monthly_buying_cost
    )
    assert first.cumulative_renting_cost == pytest.approx(18000.0)
    assert first.remaining_principal == pytest.approx(300000 - 12 * result.monthly_principal)
    assert first.property_value == pytest.approx(306000.0)
    assert first.accumulated_equity == pytest.approx(first.property_value - first.remaining_principal)
    assert first.realized_value_on_sale == pytest.approx(first.accumulated_equity - 306000 * 0.02)
    assert first.total_net_ownership_cost == pytest.approx(
        first.cumulative_buying_cost - first.realized_value_on_sale
    )


def test_projection_covers_stay(make_profile):
    result = compute(make_profile(intended_length_of_stay=7))
    assert [p.year for p in result.projection] == list(range(1, 8))
    assert result.realized_value_on_sale == result.projection[-1].realized_value_on_sale


def test_breakeven_found(make_profile):
    profile = make_profile(
        current_rental_expenses=1800,
        property_appreciation_rate=3,
        estimated_selling_costs_percentage=5,
        mid_eligible=False,
        is_first_time_buyer=True,
    )
    result = compute(profile)
    assert result.breakeven_point == 2
    first, second = result.projection[0], result.projection[1]
    assert first.total_net_ownership_cost >= first.cumulative_renting_cost
    assert second.total_net_ownership_cost < second.cumulative_renting_cost
    assert result.verdict() == "Buying becomes the cheaper option in Year 2."


def test_no_breakeven_when_rent_is_cheap(make_profile):
    result = compute(make_profile(current_rental_expenses=500, property_appreciation_rate=2, mid_eligible=False))
    assert result.breakeven_point is None
    assert result.investment_breakeven_point is None
    assert all(p.total_net_ownership_cost >= p.cumulative_renting_cost for p in result.projection)
    assert result.verdict() == "Renting is the cheaper option for your 10-year timeline."


def test_investment_breakeven(make_profile):
    result = compute(make_profile(
        property_appreciation_rate=8,
        other_upfront_costs_percentage=0,
        estimated_selling_costs_percentage=0,
        is_first_time_buyer=True,
        mid_eligible=False,
    ))
    assert result.investment_breakeven_point == 1
    assert result.projection[0].total_net_ownership_cost <= 0
    assert result.breakeven_point == 1


@pytest.mark.parametrize(
    "overrides",
    [
        {},
        {"current_rental_expenses": 2500, "property_appreciation_rate": 5},
        {"property_appreciation_rate": -5, "intended_length_of_stay": 30},
        {"interest_rate": 0, "property_appreciation_rate": 10, "intended_length_of_stay": 25},
    ],
)
def test_breakevens_are_first_crossings(make_profile, overrides):
    result = compute(make_profile(**overrides))
    crossings = [p.year for p in result.projection if p.total_net_ownership_cost < p.cumulative_renting_cost]
    assert result.breakeven_point == (crossings[0] if crossings else None)
    paid_back = [p.year for p in result.projection if p.total_net_ownership_cost <= 0]
    assert result.investment_breakeven_point == (paid_back[0] if paid_back else None)


def test_equity_never_negative(make_profile):
    result = compute(make_profile(property_appreciation_rate=-5, intended_length_of_stay=30))
    assert all(p.accumulated_equity >= 0 for p in result.projection)
    assert all(p.remaining_principal >= 0 for p in result.projection)


def test_final_sale_value_rises_with_appreciation(make_profile):
    values = [
        compute(make_profile(property_appreciation_rate=rate)).realized_value_on_sale
        for rate in (-5, -2, 0, 1.5, 2, 5, 10, 20)
    ]
    assert values == sorted(values)


def test_compute_is_idempotent(make_profile):
    profile = make_profile(is_eligible_for_huurtoeslag=True, annual_income=25000, current_rental_expenses=750)
    assert compute(profile) == compute(profile)


def test_result_keeps_inputs(make_profile):
    profile = make_profile()
    result = compute(profile)
    assert isinstance(result, AnalysisResult)
    assert result.inputs is profile


def test_rejects_unvalidated_input(raw_record):
    with pytest.raises(ContractViolation):
        compute(raw_record)
    with pytest.raises(TypeError):
        compute(None)
