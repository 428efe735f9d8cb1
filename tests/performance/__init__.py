"""Performance benchmarks for HR Record Filter."""
