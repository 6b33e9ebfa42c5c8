"""
Pytest configuration and fixtures for fieldcheck tests
"""
import logging

import pytest

from fieldcheck.core.messages import DEFAULT_MESSAGES
from fieldcheck.core.validators import Validator


def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )
    config.addinivalue_line(
        "markers", "known_defect: Behavior kept for compatibility that looks wrong"
    )


@pytest.fixture
def validator() -> Validator:
    """Fresh validator with default templates"""
    return Validator()


@pytest.fixture
def debug_validator() -> Validator:
    """Validator with diagnostics enabled"""
    return Validator(debug=True)


@pytest.fixture
def german_messages() -> dict[str, str]:
    """Complete replacement template set"""
    return {kind: f"{{{{field}}}} ist ungültig ({kind})" for kind in DEFAULT_MESSAGES}


@pytest.fixture
def capture_logger() -> logging.Logger:
    """Logger without handlers so caplog sees every record"""
    logger = logging.getLogger("fieldcheck.tests")
    logger.handlers.clear()
    logger.setLevel(logging.DEBUG)
    logger.propagate = True
    return logger
