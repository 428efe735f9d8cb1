"""
Test Suite for HR Record Filter.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end pipeline tests
    - performance/: Filter pass benchmarks (marked slow where large)
    - fixtures/: Shared test data and configurations

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest -m "not slow"                    # Skip large benchmarks
    pytest --cov=src/hr_record_filter       # With coverage
"""
