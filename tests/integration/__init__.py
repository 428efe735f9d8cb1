"""
Integration Tests - End-to-End Pipeline Tests.

These tests run complete filter passes through create_pipeline with
in-memory employee and job lookups.

Test Files:
    - test_record_pipeline.py: Pipeline properties and audit trail
    - test_list_views.py: Attendance, leave and recruitment scenarios
"""
