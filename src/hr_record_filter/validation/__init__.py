"""
Validation Package - Criteria Validation.

    - CriteriaValidator: fail-fast check of criteria before a filter pass
    - ValidationError: raised with an aggregated, actionable message
"""

from hr_record_filter.validation.criteria_validator import (
    CriteriaValidator,
    ValidationError,
)

__all__ = [
    "CriteriaValidator",
    "ValidationError",
]
