"""
Test Fixtures - Shared Test Data and Configurations.

    - sample_config.yaml: Sample configuration for loader tests
    - attendance_payload.json: Backend-shaped attendance response
"""
