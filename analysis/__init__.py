from .engine import compute
from .models import (
    AnalysisResult,
    ContractViolation,
    EmploymentStatus,
    HouseholdSize,
    InputProfile,
    ProjectionYear,
)
from .validation import ValidationResult, validate

__all__ = [
    "AnalysisResult",
    "ContractViolation",
    "EmploymentStatus",
    "HouseholdSize",
    "InputProfile",
    "ProjectionYear",
    "ValidationResult",
    "compute",
    "validate",
]
