"""Zero tax provider (returns zero tax for every item)."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict

from ..models import CommonOrder
from .base import TaxProvider


class ZeroTaxProvider(TaxProvider):
    name = "zero-tax"
    display_name = "Zero Tax"

    async def calculate_order_taxes(self, *, context: Any, order: CommonOrder) -> Dict[str, Any]:
        return {
            "tax_summary": {
                "calculated_at": datetime.now(timezone.utc),
                "calculated_by_tax_service_name": self.name,
                "tax": Decimal("0"),
                "taxable_amount": Decimal("0"),
                "taxes": [],
            },
            "item_taxes": [
                {"item_id": item.item_id, "tax": Decimal("0"), "taxable_amount": Decimal("0"), "taxes": []}
                for item in order.items
            ],
        }
