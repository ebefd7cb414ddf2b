import pytest

from analysis.models import HouseholdSize
from analysis.rent import calculate_huurtoeslag, net_monthly_rent, rent_subsidy


def test_subsidy_scaled_by_income():
    # (700 - 250) * 0.75 * (1 - 20000/30000)
    assert calculate_huurtoeslag(20000, 700, HouseholdSize.SINGLE) == pytest.approx(112.5)


def test_subsidy_capped():
    assert calculate_huurtoeslag(1000, 800, HouseholdSize.COUPLE) == 350.0


def test_rent_above_cap_gets_nothing():
    assert calculate_huurtoeslag(60000, 1500, HouseholdSize.SINGLE) == 0.0
    assert calculate_huurtoeslag(10000, 809, HouseholdSize.SINGLE) == 0.0


def test_income_above_limit_gets_nothing():
    assert calculate_huurtoeslag(30001, 700, HouseholdSize.SINGLE) == 0.0
    # Couples have a higher limit
    assert calculate_huurtoeslag(30001, 700, HouseholdSize.COUPLE) > 0.0


def test_low_rent_never_negative():
    assert calculate_huurtoeslag(10000, 200, HouseholdSize.SINGLE) == 0.0


def test_not_eligible():
    assert rent_subsidy(False, 20000, 700, HouseholdSize.SINGLE) == 0.0
    assert rent_subsidy(True, 20000, 700, None) == 0.0
    assert rent_subsidy(True, 20000, 700, HouseholdSize.SINGLE) == pytest.approx(112.5)


def test_net_rent():
    assert net_monthly_rent(700, 112.5) == pytest.approx(587.5)
