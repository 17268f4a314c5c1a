"""
Shop Tax Configuration Resolver

Turns a shop's persisted tax settings into the installed tax services they
name.
"""

import logging
from typing import Optional

from .models import ResolvedTaxServices
from .protocols import TaxServiceConfigurationError, TaxSettingsRepositoryProtocol
from .registration import TaxServiceRegistry

logger = logging.getLogger(__name__)


class TaxServiceResolver:
    """Resolves the active and fallback tax service of a shop"""

    def __init__(self, registry: TaxServiceRegistry, settings_repository: TaxSettingsRepositoryProtocol):
        self.registry = registry
        self.settings_repository = settings_repository

    async def resolve(self, shop_id: str) -> Optional[ResolvedTaxServices]:
        """
        Resolve the tax services configured for a shop

        Args:
            shop_id: Shop ID

        Returns:
            The resolved services, or None when the shop has no tax settings
            or no active tax service set

        Raises:
            TaxServiceConfigurationError: A configured service is not installed
        """
        config = await self.settings_repository.find_shop_tax_config(shop_id)
        if config is None:
            return None

        # at least an active service must be set
        if not config.active_tax_service_name:
            return None

        active_service = self.registry.get(config.active_tax_service_name)
        if not active_service:
            raise self._missing_service("Active", config.active_tax_service_name, shop_id)

        fallback_service = None
        if config.fallback_tax_service_name:
            fallback_service = self.registry.get(config.fallback_tax_service_name)
            if not fallback_service:
                raise self._missing_service("Fallback", config.fallback_tax_service_name, shop_id)

        return ResolvedTaxServices(active_service=active_service, fallback_service=fallback_service)

    def _missing_service(self, role: str, service_name: str, shop_id: str) -> TaxServiceConfigurationError:
        message = (
            f'{role} tax service is "{service_name}" but no such service exists. '
            "Did you forget to install the plugin that provides this service?"
        )
        logger.error(f"Shop {shop_id}: {message}")
        return TaxServiceConfigurationError(message, service_name=service_name, shop_id=shop_id)
