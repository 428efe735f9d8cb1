"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with synthetic lookups.

Test Files:
    - test_classifiers.py: Time, duration and band classification
    - test_search_filter.py: Free-text search
    - test_dimension_filter.py: Set-membership dimensions
    - test_date_range_filter.py: Single-day and interval ranges
    - test_category_filter.py: Derived category filtering
    - test_filter_criteria.py: Criteria transitions
    - test_criteria_validator.py: Fail-fast criteria checks
    - test_config_loader.py: Configuration loading/validation
    - test_strategy_registry.py: Strategy registration
    - test_adapters.py: Lookups, payload loader, logger, metrics
    - test_facets.py: Filter menu options
"""
