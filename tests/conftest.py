"""Shared pytest configuration for the OrderTreeLib test suite."""


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: long-running tests excluded by run_tests.py by default"
    )
