"""
Tax Service

Pluggable tax-calculation dispatcher providing:
- Registry of tax-calculation services declared by installed plugins
- Per-shop resolution of the active and fallback tax service
- Fulfillment group tax calculation with fallback and result validation
"""

__version__ = "1.0.0"
__service__ = "tax_service"
