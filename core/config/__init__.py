#!/usr/bin/env python3
"""Modular configuration system for the tax platform

Configuration hierarchy:
- infra_config: PostgreSQL holding shop package settings
- logging_config: Logging configuration
- tax_config: Tax settings location and the combined platform config
"""
import os
from dotenv import load_dotenv
from .logging_config import LoggingConfig, configure_logging
from .infra_config import InfraConfig
from .tax_config import TaxPlatformConfig, TaxSettingsConfig

# Load environment file based on ENV
env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
env_files = {
    "development": "deployment/environments/dev.env",
    "dev": "deployment/environments/dev.env",
    "testing": "deployment/environments/test.env",
    "test": "deployment/environments/test.env",
    "staging": "deployment/environments/staging.env",
    "production": "deployment/environments/production.env",
}
env_file = env_files.get(env, "deployment/environments/dev.env")
load_dotenv(env_file, override=False)

# Create global settings instance
settings = TaxPlatformConfig.from_env()

def get_settings() -> TaxPlatformConfig:
    """Get global settings instance"""
    return settings

def reload_settings() -> TaxPlatformConfig:
    """Reload settings from environment"""
    global settings
    settings = TaxPlatformConfig.from_env()
    return settings

__all__ = [
    # Main config
    'TaxPlatformConfig',
    'get_settings',
    'reload_settings',
    'settings',
    # Sub-configs
    'LoggingConfig',
    'InfraConfig',
    'TaxSettingsConfig',
    'configure_logging',
]
