"""Tax providers."""

from .base import TaxProvider
from .zero import ZeroTaxProvider

__all__ = ["TaxProvider", "ZeroTaxProvider"]
