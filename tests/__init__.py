"""
cli-init test suite
===================

Test Modules
------------
- test_models.py: Tests for the application and sub-command models
- test_identity.py: Tests for git identity resolution
- test_registry.py: Tests for template loading
- test_generator.py: Tests for rendering and file generation
- test_cli.py: Tests for the command-line interface
- test_errors.py: Tests for the error hierarchy

Running Tests
-------------
    # Run all tests
    pytest

    # Run specific module
    pytest tests/test_models.py

    # Run specific test class
    pytest tests/test_models.py::TestBuildSubCommands
"""
