"""
Tax Service Protocols (Interfaces)

These interfaces define contracts for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Any, Optional, Protocol, runtime_checkable

# Import only models (no I/O dependencies)
from .models import CommonOrder, ShopTaxConfiguration


# ============================================================================
# Custom Exceptions - defined here to avoid importing repository
# ============================================================================

class TaxServiceError(Exception):
    """Base exception for tax service errors"""
    error_code = "tax-error"

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code


class TaxCalculationError(TaxServiceError):
    """Taxes could not be calculated; the message is always generic"""
    error_code = "internal-error"

    def __init__(self, message: str = "Error while calculating taxes"):
        super().__init__(message)


class TaxServiceConfigurationError(TaxServiceError):
    """A shop references a tax service that is not installed"""
    error_code = "invalid-configuration"

    def __init__(self, message: str, service_name: Optional[str] = None, shop_id: Optional[str] = None):
        super().__init__(message)
        self.service_name = service_name
        self.shop_id = shop_id


# ============================================================================
# Tax Calculation Service Protocol
# ============================================================================

@runtime_checkable
class TaxCalculationServiceProtocol(Protocol):
    """
    Interface every installable tax calculation service implements.

    Returns a TaxServiceResult-shaped mapping or model, or None when the
    service cannot calculate (for example a missing shipping address).
    """

    async def calculate_order_taxes(self, *, context: Any, order: CommonOrder) -> Optional[Any]:
        """Calculate taxes for an order"""
        ...


# ============================================================================
# Repository Protocol
# ============================================================================

@runtime_checkable
class TaxSettingsRepositoryProtocol(Protocol):
    """
    Interface for the shop tax settings store.

    Implementations must provide these methods.
    Used for dependency injection to enable testing.
    """

    async def find_shop_tax_config(self, shop_id: str) -> Optional[ShopTaxConfiguration]:
        """Get the tax configuration of a shop, or None when there is none"""
        ...
