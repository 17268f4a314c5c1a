"""
Tax Service Factory

Factory functions for creating service instances with real dependencies.
This is the ONLY place that imports I/O-dependent modules.

Usage:
    from .factory import create_tax_service, create_tax_settings_pool
    pool = await create_tax_settings_pool(config)
    service = create_tax_service(config, registry=registry, pool=pool)
"""
import logging
from typing import Optional

from core.config import TaxPlatformConfig, get_settings

from .protocols import TaxSettingsRepositoryProtocol
from .registration import TaxServiceRegistry
from .tax_service import TaxService

logger = logging.getLogger(__name__)


async def create_tax_settings_pool(config: Optional[TaxPlatformConfig] = None):
    """Open the asyncpg pool the tax settings repository reads from"""
    import asyncpg

    config = config or get_settings()
    infra = config.infrastructure

    logger.info(f"Connecting to PostgreSQL at {infra.postgres_host}:{infra.postgres_port}")
    return await asyncpg.create_pool(
        dsn=infra.postgres_dsn,
        min_size=infra.postgres_min_pool_size,
        max_size=infra.postgres_max_pool_size,
    )


def create_tax_service(
    config: Optional[TaxPlatformConfig] = None,
    registry: Optional[TaxServiceRegistry] = None,
    pool=None,
    settings_repository: Optional[TaxSettingsRepositoryProtocol] = None,
) -> TaxService:
    """
    Create TaxService with real dependencies.

    This function imports the real repository (which has I/O dependencies).
    Use this in production, NOT in tests.

    Args:
        config: Platform configuration
        registry: Registry the installed plugins registered into
        pool: asyncpg pool for the settings repository
        settings_repository: Settings store to use instead of the asyncpg one

    Returns:
        Configured TaxService instance
    """
    config = config or get_settings()
    registry = registry if registry is not None else TaxServiceRegistry()

    if settings_repository is None:
        if pool is None:
            raise ValueError("pool is required when no settings_repository is given")
        # Import real repository here (not at module level)
        from .tax_settings_repository import TaxSettingsRepository

        settings_repository = TaxSettingsRepository(pool, config=config.tax_settings)

    return TaxService(registry=registry, settings_repository=settings_repository)
