"""
Component Test Layer Configuration (Layer 3)

Structure:
    tests/component/
    └── tdd/         🆕 TDD (tax service with mocked dependencies)

Usage:
    pytest tests/component -v
    pytest tests/component/tdd/tax_service -v
"""
import os
import sys

import pytest

# Set testing environment BEFORE any imports
os.environ["ENV"] = "testing"
os.environ["ENVIRONMENT"] = "testing"

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from tests.component.tdd.tax_service.mocks import (
    MockTaxSettingsRepository,
    MockTaxCalculationService,
)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "component: marks tests as component tests"
    )


# =============================================================================
# Repository Mocks
# =============================================================================

@pytest.fixture
def mock_settings_repo() -> MockTaxSettingsRepository:
    """Mock shop tax settings store"""
    return MockTaxSettingsRepository()


# =============================================================================
# Tax Calculation Service Mocks
# =============================================================================

@pytest.fixture
def active_tax_service() -> MockTaxCalculationService:
    """Mock active tax calculation service"""
    return MockTaxCalculationService(name="active-tax", display_name="Active Tax")


@pytest.fixture
def fallback_tax_service() -> MockTaxCalculationService:
    """Mock fallback tax calculation service"""
    return MockTaxCalculationService(name="fallback-tax", display_name="Fallback Tax")
