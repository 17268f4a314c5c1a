"""
Tax Settings Repository

Data access layer for shop tax settings using an asyncpg pool.
Reads the settings of the tax package row of each shop.
"""

import json
import logging
from typing import Any, Dict, Optional

import asyncpg
from pydantic import ValidationError

from core.config import TaxSettingsConfig

from .models import ShopTaxConfiguration
from .protocols import TaxServiceConfigurationError

logger = logging.getLogger(__name__)

# Stored settings use the camelCase keys of the package settings document
_SETTINGS_KEYS = {
    "activeTaxServiceName": "active_tax_service_name",
    "fallbackTaxServiceName": "fallback_tax_service_name",
}


class TaxSettingsRepository:
    """
    Repository for shop tax settings.

    Tables:
        - {schema}.{table}: Package rows with a JSONB settings column
    """

    def __init__(self, pool: asyncpg.Pool, config: Optional[TaxSettingsConfig] = None):
        """Initialize Tax Settings Repository with an asyncpg pool"""
        if config is None:
            config = TaxSettingsConfig.from_env()

        self.pool = pool
        self.package_name = config.package_name
        self.schema = config.schema
        self.table = config.table

        logger.info(f"TaxSettingsRepository initialized for package {self.package_name}")

    async def find_shop_tax_config(self, shop_id: str) -> Optional[ShopTaxConfiguration]:
        """Get the tax configuration of a shop"""
        try:
            query = f'SELECT settings FROM "{self.schema}"."{self.table}" WHERE name = $1 AND shop_id = $2 LIMIT 1'

            async with self.pool.acquire() as conn:
                row = await conn.fetchrow(query, self.package_name, shop_id)

            if row is None:
                return None

            return self._normalize_settings(shop_id, row["settings"])

        except Exception as e:
            logger.error(f"Failed to get tax settings for shop {shop_id}: {e}")
            raise

    def _normalize_settings(self, shop_id: str, settings: Any) -> ShopTaxConfiguration:
        """Normalize package settings from database"""
        # Handle JSONB fields
        if isinstance(settings, str):
            settings = json.loads(settings)

        normalized: Dict[str, Any] = {}
        for key, value in (settings or {}).items():
            normalized[_SETTINGS_KEYS.get(key, key)] = value

        try:
            return ShopTaxConfiguration(
                shop_id=shop_id,
                active_tax_service_name=normalized.get("active_tax_service_name"),
                fallback_tax_service_name=normalized.get("fallback_tax_service_name"),
            )
        except ValidationError as e:
            logger.error(f"Invalid tax settings stored for shop {shop_id}: {e}")
            raise TaxServiceConfigurationError(
                f"Tax settings of shop {shop_id} are invalid", shop_id=shop_id
            ) from e
