"""Turn a raw form/storage record into an InputProfile or a field -> message map."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .models import EmploymentStatus, HouseholdSize, InputProfile

logger = logging.getLogger(__name__)

_MISSING = object()

_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off"}


@dataclass(frozen=True)
class NumberRule:
    label: str
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    exclusive_minimum: bool = False
    default: Any = _MISSING
    integer: bool = False


# Field name -> rule. Percentages are in percent (4.1 = 4.1%).
NUMBER_RULES: Dict[str, NumberRule] = {
    "age": NumberRule("Age", 18, 100),
    "annual_income": NumberRule("Annual income", 0, exclusive_minimum=True),
    "savings": NumberRule("Savings", 0),
    "current_rental_expenses": NumberRule("Current rent", 0, exclusive_minimum=True),
    "max_mortgage": NumberRule("Mortgage amount", 0, exclusive_minimum=True),
    "overbid_amount": NumberRule("Overbid amount", 0, default=0.0),
    "interest_rate": NumberRule("Interest rate", 0, 20),
    "marginal_tax_rate": NumberRule("Marginal tax rate", 0, 100),
    "property_transfer_tax_percentage": NumberRule("Transfer tax", 0, 10, default=2.0),
    "other_upfront_costs_percentage": NumberRule("Other upfront costs", 0, 10),
    "maintenance_percentage": NumberRule("Maintenance", 0, 10),
    "property_appreciation_rate": NumberRule("Appreciation rate", -5, 20),
    "estimated_selling_costs_percentage": NumberRule("Selling costs", 0, 10),
    "intended_length_of_stay": NumberRule("Length of stay", 1, 30, integer=True),
}

BOOL_DEFAULTS: Dict[str, bool] = {
    "is_first_time_buyer": False,
    "mid_eligible": True,
    "is_eligible_for_huurtoeslag": False,
}


@dataclass(frozen=True)
class ValidationResult:
    profile: Optional[InputProfile] = None
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.profile is not None and not self.errors


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _coerce_number(value: Any) -> Optional[float]:
    # bool is an int subclass; a checkbox value is never a valid amount
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def _check_number(name: str, value: Any, rule: NumberRule, errors: Dict[str, str]) -> Optional[float]:
    if _is_blank(value) or value is _MISSING:
        if rule.default is not _MISSING:
            return float(rule.default)
        errors[name] = f"{rule.label} is required."
        return None

    number = _coerce_number(value)
    if number is None:
        errors[name] = f"{rule.label} must be a number."
        return None

    if rule.integer and not number.is_integer():
        errors[name] = f"{rule.label} must be a whole number."
        return None

    if rule.minimum is not None:
        if rule.exclusive_minimum and number <= rule.minimum:
            errors[name] = f"{rule.label} must be greater than {rule.minimum:g}."
            return None
        if not rule.exclusive_minimum and number < rule.minimum:
            errors[name] = f"{rule.label} must be at least {rule.minimum:g}."
            return None
    if rule.maximum is not None and number > rule.maximum:
        errors[name] = f"{rule.label} cannot exceed {rule.maximum:g}."
        return None
    return number


def _check_bool(name: str, value: Any, default: bool, errors: Dict[str, str]) -> bool:
    if value is _MISSING or value is None or (isinstance(value, str) and not value.strip()):
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    errors[name] = "Must be true or false."
    return default


def _check_enum(name: str, value: Any, enum_cls, label: str, errors: Dict[str, str], required: bool):
    if _is_blank(value) or value is _MISSING:
        if required:
            errors[name] = f"{label} is required."
        return None
    if isinstance(value, enum_cls):
        return value
    for member in enum_cls:
        if value == member.value:
            return member
    options = ", ".join(member.value for member in enum_cls)
    errors[name] = f"{label} must be one of: {options}."
    return None


def validate(raw: Mapping[str, Any]) -> ValidationResult:
    """
    Validate a flat raw record.

    Never raises for bad input: problems come back in ``errors`` keyed by
    field name. The household size / rent allowance rule is only checked
    once every individual field is valid.
    """
    if not isinstance(raw, Mapping):
        return ValidationResult(errors={"__all__": "Input must be a key/value record."})

    errors: Dict[str, str] = {}

    numbers = {
        name: _check_number(name, raw.get(name, _MISSING), rule, errors)
        for name, rule in NUMBER_RULES.items()
    }
    flags = {
        name: _check_bool(name, raw.get(name, _MISSING), default, errors)
        for name, default in BOOL_DEFAULTS.items()
    }
    employment = _check_enum(
        "employment_status",
        raw.get("employment_status", _MISSING),
        EmploymentStatus,
        "Employment status",
        errors,
        required=True,
    )
    household = _check_enum(
        "household_size",
        raw.get("household_size", _MISSING),
        HouseholdSize,
        "Household size",
        errors,
        required=False,
    )

    if not errors and flags["is_eligible_for_huurtoeslag"] and household is None:
        errors["household_size"] = "Household size is required when rent allowance is selected."

    if errors:
        logger.info("Input rejected: %s", ", ".join(sorted(errors)))
        return ValidationResult(errors=errors)

    profile = InputProfile(
        age=numbers["age"],
        annual_income=numbers["annual_income"],
        employment_status=employment,
        household_size=household,
        savings=numbers["savings"],
        current_rental_expenses=numbers["current_rental_expenses"],
        max_mortgage=numbers["max_mortgage"],
        overbid_amount=numbers["overbid_amount"],
        interest_rate=numbers["interest_rate"],
        marginal_tax_rate=numbers["marginal_tax_rate"],
        property_transfer_tax_percentage=numbers["property_transfer_tax_percentage"],
        other_upfront_costs_percentage=numbers["other_upfront_costs_percentage"],
        maintenance_percentage=numbers["maintenance_percentage"],
        property_appreciation_rate=numbers["property_appreciation_rate"],
        estimated_selling_costs_percentage=numbers["estimated_selling_costs_percentage"],
        is_first_time_buyer=flags["is_first_time_buyer"],
        mid_eligible=flags["mid_eligible"],
        is_eligible_for_huurtoeslag=flags["is_eligible_for_huurtoeslag"],
        intended_length_of_stay=int(numbers["intended_length_of_stay"]),
    )
    return ValidationResult(profile=profile)
