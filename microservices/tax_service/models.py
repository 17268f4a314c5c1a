"""
Tax Service Data Models

Order input schema, tax service result schema and the descriptors used to
dispatch tax calculation to installed tax services.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from .protocols import TaxCalculationServiceProtocol


class OrderSourceType(str, Enum):
    """What the order input was assembled from"""
    CART = "cart"
    ORDER = "order"


class TaxSourcing(str, Enum):
    """Which address a tax was sourced from"""
    DESTINATION = "destination"
    ORIGIN = "origin"


class SchemaModel(BaseModel):
    """Schema checked at the tax service boundaries, including instances passed in"""
    model_config = ConfigDict(revalidate_instances="always")


# Order Input Models

class Money(SchemaModel):
    """Amount in a currency"""
    amount: Decimal = Field(..., ge=0)
    currency_code: str = Field(..., min_length=1)


class Address(SchemaModel):
    """Postal address used for tax sourcing"""
    address1: str
    address2: Optional[str] = None
    city: str
    company: Optional[str] = None
    country: str
    full_name: Optional[str] = None
    is_commercial: bool = False
    phone: Optional[str] = None
    postal: str
    region: str


class FulfillmentPrices(SchemaModel):
    """Fulfillment charges for the group"""
    handling: Optional[Money] = None
    shipping: Optional[Money] = None
    total: Optional[Money] = None


class OrderTotals(SchemaModel):
    """Group totals as priced before tax"""
    group_discount_total: Optional[Money] = None
    group_item_total: Optional[Money] = None
    group_total: Optional[Money] = None
    order_discount_total: Optional[Money] = None
    order_item_total: Optional[Money] = None
    order_total: Optional[Money] = None


class CommonOrderItem(SchemaModel):
    """Line item of an order or fulfillment group"""
    item_id: str = Field(..., min_length=1)
    product_id: Optional[str] = None
    variant_id: Optional[str] = None
    quantity: int = Field(..., ge=0)
    price: Money
    subtotal: Money
    is_taxable: bool = False
    tax_code: Optional[str] = None
    attributes: List[Dict[str, Any]] = Field(default_factory=list)


class CommonOrder(SchemaModel):
    """
    Order or fulfillment group to be taxed.

    Shared input shape for cart estimation and order finalization.
    """
    shop_id: str = Field(..., min_length=1)
    items: List[CommonOrderItem]
    currency_code: str = Field(default="USD", min_length=1)
    source_type: OrderSourceType = OrderSourceType.CART
    cart_id: Optional[str] = None
    order_id: Optional[str] = None
    fulfillment_method_id: Optional[str] = None
    fulfillment_prices: Optional[FulfillmentPrices] = None
    origin_address: Optional[Address] = None
    shipping_address: Optional[Address] = None
    billing_address: Optional[Address] = None
    totals: Optional[OrderTotals] = None


# Tax Service Result Models

class CalculatedTax(SchemaModel):
    """Single jurisdiction tax line"""
    tax_id: Optional[str] = None
    jurisdiction_id: Optional[str] = None
    sourcing: TaxSourcing = TaxSourcing.DESTINATION
    tax: Decimal = Field(..., ge=0)
    taxable_amount: Decimal = Field(..., ge=0)
    tax_name: str
    tax_rate: Decimal = Field(..., ge=0)


class TaxSummary(SchemaModel):
    """Summary of all taxes applied to the order"""
    calculated_at: datetime
    calculated_by_tax_service_name: Optional[str] = None
    reference_id: Optional[str] = None
    tax: Decimal = Field(..., ge=0)
    taxable_amount: Decimal = Field(..., ge=0)
    taxes: List[CalculatedTax] = Field(default_factory=list)


class ItemTax(SchemaModel):
    """Taxes applied to one order item"""
    item_id: str = Field(..., min_length=1)
    tax: Decimal = Field(..., ge=0)
    taxable_amount: Decimal = Field(..., ge=0)
    taxes: List[CalculatedTax] = Field(default_factory=list)
    custom_fields: Optional[Dict[str, Any]] = None


class TaxServiceResult(SchemaModel):
    """Contract every tax calculation service must return"""
    tax_summary: TaxSummary
    item_taxes: List[ItemTax]


# Shop Configuration

class ShopTaxConfiguration(BaseModel):
    """Tax services selected for one shop"""
    shop_id: Optional[str] = None
    active_tax_service_name: Optional[str] = None
    fallback_tax_service_name: Optional[str] = None

    @field_validator("active_tax_service_name", "fallback_tax_service_name")
    @classmethod
    def blank_name_is_unset(cls, v):
        if v is not None and not v.strip():
            return None
        return v


# Service Descriptors

@dataclass(frozen=True)
class TaxServiceDescriptor:
    """
    An installable tax calculation capability.

    `name` is the key shops use in their settings; `display_name` and
    `plugin_name` only show up in diagnostics.
    """
    name: str
    display_name: str
    service: "TaxCalculationServiceProtocol"
    plugin_name: Optional[str] = None

    async def calculate_order_taxes(self, *, context: Any, order: CommonOrder) -> Optional[Any]:
        return await self.service.calculate_order_taxes(context=context, order=order)


@dataclass(frozen=True)
class ResolvedTaxServices:
    """Tax services resolved for a shop"""
    active_service: TaxServiceDescriptor
    fallback_service: Optional[TaxServiceDescriptor] = None
