"""
Filter Options - Choices Offered by the Filter Menus.

Option sources, in order of precedence:
    - Fixed lists (statuses, leave types, bands) from configuration
    - The employee directory, for the employee and department menus of
      employee-linked record types (every listed employee, shown by name,
      and every non-empty department)
    - Otherwise the distinct values observed in the current records, in
      first-seen order, without empty values and without the "Unknown"
      sentinel

Records referencing ids outside the directory never add an option.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from hr_record_filter.domain.value_objects import DirectorySource, FilterOption
from hr_record_filter.interfaces.filter_stage import RecordFilterStrategy
from hr_record_filter.pipeline.filter_context import FilterContext


def build_filter_options(
    strategy: RecordFilterStrategy,
    records: Iterable[Any],
    context: FilterContext,
) -> Dict[str, List[FilterOption]]:
    """
    Build the option list of every dimension of a record type.

    Args:
        strategy: Strategy of the record type shown
        records: Records currently loaded in the view
        context: Lookups used to resolve and label values

    Returns:
        Dimension name -> options (value plus display label)
    """
    fixed = strategy.fixed_choices()
    directory = strategy.directory_dimensions()
    snapshot = list(records)
    options: Dict[str, List[FilterOption]] = {}

    for dimension in strategy.dimension_names():
        if dimension in fixed:
            values = list(fixed[dimension])
        else:
            values = _directory_values(directory.get(dimension), context)
            if values is None:
                values = _observed_values(strategy, dimension, snapshot, context)
        options[dimension] = [
            FilterOption(value=value, label=strategy.option_label(dimension, value, context))
            for value in values
        ]

    return options


def build_category_options(strategy: RecordFilterStrategy) -> List[str]:
    return list(strategy.category_values())


def _directory_values(
    source: Optional[DirectorySource],
    context: FilterContext,
) -> Optional[List[str]]:
    if source is DirectorySource.EMPLOYEES:
        entries = context.directory_entries()
        return None if entries is None else [employee_id for employee_id, _ in entries]
    if source is DirectorySource.DEPARTMENTS:
        return context.directory_departments()
    return None


def _observed_values(
    strategy: RecordFilterStrategy,
    dimension: str,
    records: List[Any],
    context: FilterContext,
) -> List[str]:
    seen: Dict[str, None] = {}
    for record in records:
        value = strategy.dimension_value(record, dimension, context)
        if value and value != context.unknown_label:
            seen.setdefault(value, None)
    return list(seen)
