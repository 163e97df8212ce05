"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest

from modules.statements.service import reset_statement_service
from shared.config import get_settings


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the statement service and settings caches around each test."""
    reset_statement_service()
    get_settings.cache_clear()
    yield
    reset_statement_service()
    get_settings.cache_clear()
