"""
Shared pytest fixtures for Expense Tracker tests.
"""

import pytest
import os
import sys

# Ensure the project root is on sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from repositories import InMemoryExpenseRepository, InMemorySpendingLimitRepository  # noqa: E402


class TestConfig:
    """Test configuration with fresh in-memory stores per app."""
    SECRET_KEY = 'test-secret-key-for-testing-only'
    TESTING = True
    WTF_CSRF_ENABLED = False
    LOG_LEVEL = 'DEBUG'

    @staticmethod
    def init_stores(app):
        app.expense_repository = InMemoryExpenseRepository()
        app.spending_limit_repository = InMemorySpendingLimitRepository()


@pytest.fixture
def app():
    """Create application for testing."""
    from app import create_app
    application = create_app(config_class=TestConfig)
    yield application


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def expense_repository():
    return InMemoryExpenseRepository()


@pytest.fixture
def limit_repository():
    return InMemorySpendingLimitRepository()
