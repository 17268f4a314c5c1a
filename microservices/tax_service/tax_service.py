"""
Tax Service Business Logic

Dispatches fulfillment group tax calculation to the tax service a shop has
configured, falling back to its secondary service when the active one fails.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import ValidationError

from .models import CommonOrder, TaxServiceResult
from .protocols import TaxCalculationError, TaxSettingsRepositoryProtocol
from .registration import TaxServiceRegistry
from .tax_config_resolver import TaxServiceResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceOk:
    """Tax service returned; result is None when it declined to calculate"""
    result: Optional[Any]


@dataclass(frozen=True)
class ServiceFailure:
    """Tax service raised"""
    cause: Exception


ServiceOutcome = Union[ServiceOk, ServiceFailure]


def default_tax_result(order: CommonOrder, force_zeroes: bool) -> Dict[str, Any]:
    """
    Result used when no tax service calculated anything

    Args:
        order: Validated order
        force_zeroes: True to report zero tax for every item, False to report
            taxes as unknown

    Returns:
        Zeroed result, or an empty result with tax_summary None
    """
    if not force_zeroes:
        return {"item_taxes": [], "tax_summary": None}

    return {
        "tax_summary": {
            "calculated_at": datetime.now(timezone.utc),
            "tax": Decimal("0"),
            "taxable_amount": Decimal("0"),
            "taxes": [],
        },
        "item_taxes": [
            {"item_id": item.item_id, "tax": Decimal("0"), "taxable_amount": Decimal("0"), "taxes": []}
            for item in order.items
        ],
    }


class TaxService:
    """
    Fulfillment group tax calculation

    Resolves the shop's tax services, invokes them and validates what they
    return. Holds no per-call state, so one instance serves concurrent calls.
    """

    def __init__(
        self,
        registry: TaxServiceRegistry,
        settings_repository: Optional[TaxSettingsRepositoryProtocol] = None,
        resolver: Optional[TaxServiceResolver] = None,
    ):
        """
        Initialize Tax Service

        Args:
            registry: Registry of installed tax services
            settings_repository: Shop tax settings store (dependency injection)
            resolver: Resolver to use instead of one built from the repository
        """
        if resolver is None:
            if settings_repository is None:
                raise ValueError("settings_repository or resolver is required")
            resolver = TaxServiceResolver(registry, settings_repository)

        self.registry = registry
        self.resolver = resolver

    async def compute_fulfillment_group_taxes(
        self,
        context: Any,
        order: Union[CommonOrder, Dict[str, Any]],
        force_zeroes: bool = False,
    ) -> Any:
        """
        Calculate all taxes that apply to an order or fulfillment group

        Args:
            context: App context, passed through to the tax service
            order: Order in the CommonOrder schema
            force_zeroes: True to get zero taxes when no tax service calculates
                (finalized orders), False to get unknown taxes (carts)

        Returns:
            The tax service result, unchanged, or the default result

        Raises:
            TaxCalculationError: Invalid order, failing tax services or an
                invalid tax service result
            TaxServiceConfigurationError: The shop names a tax service that is
                not installed
        """
        try:
            common_order = CommonOrder.model_validate(order)
        except ValidationError as e:
            logger.error(f"Invalid order input provided to compute_fulfillment_group_taxes: {e}")
            raise TaxCalculationError() from e

        resolved = await self.resolver.resolve(common_order.shop_id)
        if resolved is None:
            return default_tax_result(common_order, force_zeroes)

        service = resolved.active_service
        outcome = await self._invoke(service, context, common_order)

        if isinstance(outcome, ServiceFailure):
            logger.error(
                f"Error in calculate_order_taxes for the active tax service ({_display_name(service)}): {outcome.cause}",
                exc_info=outcome.cause,
            )
            if not resolved.fallback_service:
                raise TaxCalculationError() from outcome.cause

            logger.info("Primary tax service calculation failed. Using set fallback tax service")
            service = resolved.fallback_service
            outcome = await self._invoke(service, context, common_order)

            if isinstance(outcome, ServiceFailure):
                logger.error(
                    f"Error in calculate_order_taxes for the fallback tax service ({_display_name(service)}): {outcome.cause}",
                    exc_info=outcome.cause,
                )
                raise TaxCalculationError() from outcome.cause

        # The tax service may return None if it can't calculate due to missing info
        if outcome.result is None:
            return default_tax_result(common_order, force_zeroes)

        try:
            TaxServiceResult.model_validate(outcome.result)
        except ValidationError as e:
            logger.error(
                f"Invalid return from calculate_order_taxes for the tax service ({_display_name(service)}): {e}"
            )
            raise TaxCalculationError() from e

        return outcome.result

    async def _invoke(self, service: Any, context: Any, order: CommonOrder) -> ServiceOutcome:
        try:
            result = await service.calculate_order_taxes(context=context, order=order)
        except Exception as e:
            return ServiceFailure(cause=e)
        return ServiceOk(result=result)


def _display_name(service: Any) -> Any:
    if isinstance(service, Mapping):
        return service.get("display_name") or service.get("displayName") or service.get("name")
    return getattr(service, "display_name", None) or getattr(service, "name", service)
