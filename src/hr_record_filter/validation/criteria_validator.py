"""
Criteria Validator - Validate Filter Criteria.

Optional fail-fast check of criteria before a pass, for callers that
build criteria from URLs or saved views rather than from the UI widgets:
    - Selected dimensions exist for the record type
    - Date bounds are ISO dates (YYYY-MM-DD)
    - from is not after to
    - Category values are known for the record type

The pipeline itself never raises on criteria; without a validator unknown
dimensions are ignored and an inverted range simply matches nothing.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, List, Optional

from hr_record_filter.domain.value_objects import FilterCriteria

if TYPE_CHECKING:
    from hr_record_filter.interfaces.filter_stage import RecordFilterStrategy

logger = logging.getLogger(__name__)

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class ValidationError(Exception):
    """Raised when criteria validation fails."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class CriteriaValidator:
    """Validates filter criteria against a record strategy."""

    def validate(
        self,
        criteria: FilterCriteria,
        strategy: "RecordFilterStrategy",
    ) -> None:
        """
        Validate criteria.

        Args:
            criteria: The criteria to validate
            strategy: Strategy of the record type being filtered

        Raises:
            ValidationError: If validation fails
        """
        checks = {
            "selections": self._validate_dimensions(criteria, strategy),
            "date_range": self._validate_date_range(criteria),
            "category": self._validate_category(criteria, strategy),
        }
        errors: List[str] = [e for messages in checks.values() for e in messages]

        if errors:
            error_message = "; ".join(errors)
            # First failing part of the criteria
            field = next(name for name, messages in checks.items() if messages)
            logger.error(f"Criteria validation failed: {error_message}")
            raise ValidationError(error_message, field=field)

        logger.debug(f"Criteria validated for {strategy.record_type.value}")

    def _validate_dimensions(
        self,
        criteria: FilterCriteria,
        strategy: "RecordFilterStrategy",
    ) -> List[str]:
        known = strategy.dimension_names()
        return [
            f"Unknown dimension '{name}' for {strategy.record_type.value}. "
            f"Known: {', '.join(known)}"
            for name in criteria.active_selections()
            if name not in known
        ]

    def _validate_date_range(self, criteria: FilterCriteria) -> List[str]:
        if criteria.date_range is None:
            return []

        errors: List[str] = []
        from_date = criteria.date_range.from_date
        to_date = criteria.date_range.to_date
        for label, value in (("from", from_date), ("to", to_date)):
            if value and not ISO_DATE_PATTERN.match(value):
                errors.append(f"date_range.{label}={value!r} is not YYYY-MM-DD")

        if not errors and from_date and to_date and from_date > to_date:
            errors.append(f"date_range.from {from_date} is after date_range.to {to_date}")
        return errors

    def _validate_category(
        self,
        criteria: FilterCriteria,
        strategy: "RecordFilterStrategy",
    ) -> List[str]:
        if not criteria.category:
            return []

        allowed = strategy.category_values()
        if not allowed:
            return [f"{strategy.record_type.value} records have no category filter"]
        unknown = sorted(criteria.category - set(allowed))
        if unknown:
            return [
                f"Unknown categories {unknown}. Supported: {', '.join(allowed)}"
            ]
        return []
