"""
Tax Service Contracts

This module provides the contracts for tax_service testing.
"""

from .data_contract import TaxTestDataFactory

__all__ = ["TaxTestDataFactory"]
