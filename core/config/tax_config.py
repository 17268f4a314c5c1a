#!/usr/bin/env python3
"""Tax platform main configuration

Combines all sub-configs and includes the shop tax settings location.
"""
import os
from dataclasses import dataclass, field

from .infra_config import InfraConfig
from .logging_config import LoggingConfig


def _bool(val: str) -> bool:
    return val.lower() == "true"


@dataclass
class TaxSettingsConfig:
    """Where shop tax settings are persisted"""
    # Package row holding activeTaxServiceName / fallbackTaxServiceName
    package_name: str = "reaction-taxes"
    schema: str = "public"
    table: str = "packages"

    @classmethod
    def from_env(cls) -> 'TaxSettingsConfig':
        return cls(
            package_name=os.getenv("TAX_SETTINGS_PACKAGE", "reaction-taxes"),
            schema=os.getenv("TAX_SETTINGS_SCHEMA", "public"),
            table=os.getenv("TAX_SETTINGS_TABLE", "packages"),
        )


@dataclass
class TaxPlatformConfig:
    """Main tax platform configuration with all sub-configs"""

    # Environment
    environment: str = "development"
    debug: bool = False

    # Sub-configurations
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    infrastructure: InfraConfig = field(default_factory=InfraConfig)
    tax_settings: TaxSettingsConfig = field(default_factory=TaxSettingsConfig)

    @classmethod
    def from_env(cls) -> 'TaxPlatformConfig':
        """Load complete configuration from environment"""
        env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
        return cls(
            environment=env,
            debug=_bool(os.getenv("DEBUG", "true" if env == "development" else "false")),
            logging=LoggingConfig.from_env(),
            infrastructure=InfraConfig.from_env(),
            tax_settings=TaxSettingsConfig.from_env(),
        )
