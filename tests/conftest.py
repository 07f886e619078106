"""
Test Configuration and Fixtures.

Provides shared fixtures for all tests.
"""

import pytest
from flask import Flask
from flask.testing import FlaskClient

from holiday_rules.app import create_app
from holiday_rules.core import HolidaySet
from holiday_rules.providers import create


@pytest.fixture
def app() -> Flask:
    """Create test Flask application."""
    test_config = {
        "TESTING": True,
    }
    return create_app(test_config)


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create test client."""
    return app.test_client()


@pytest.fixture
def sweden_2024() -> HolidaySet:
    """Swedish holidays for 2024 in the default locale."""
    return create("SE", 2024)


@pytest.fixture
def usa_2021() -> HolidaySet:
    """US federal holidays for 2021, a year with several weekend holidays."""
    return create("US", 2021)
