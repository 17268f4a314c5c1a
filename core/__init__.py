#!/usr/bin/env python3
"""
Core Module for the Tax Platform

Shared components for the tax microservices.

COMPONENTS:
    - config/: Environment-driven configuration (logging, PostgreSQL, tax settings)

USAGE:
    from core.config import get_settings, configure_logging

    settings = get_settings()
    configure_logging(settings.logging)
"""

__version__ = "1.0.0"
