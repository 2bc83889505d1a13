"""Test suite for the Go safe enum generator.

Test Structure:
- domain/: Tests for label sanitizing, declaration scanning, package lookup and Go emission
- application/: Tests for the end-to-end generation pipeline
- config/: Tests for configuration management
- test_main.py: Command line tests

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
    pytest -m integration     # Run pipeline tests only
"""

__version__ = "0.1.0"
