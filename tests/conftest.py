"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers (Top-Down TDD):
    - component/: Component tests (mocked dependencies)
    - unit/       : Unit tests (pure functions, no I/O)
"""
import os
import sys

import pytest

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from tests.contracts.tax import TaxTestDataFactory


# =============================================================================
# Shared Fixtures
# =============================================================================

@pytest.fixture
def tax_factory():
    """Tax test data factory"""
    return TaxTestDataFactory


@pytest.fixture
def order():
    """Valid CommonOrder input with two items"""
    return TaxTestDataFactory.make_order(item_count=2)
