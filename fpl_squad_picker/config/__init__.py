"""
FPL Squad Picker Configuration Module

Provides centralized configuration management for the entire application.
Import the global config instance to access all configuration values.

Usage:
    from fpl_squad_picker.config import config

    # Default squad budget
    budget = config.recommendation.default_budget

    # Catalog endpoint
    url = config.catalog.bootstrap_static_url
"""

from .settings import (
    CatalogConfig,
    FPLConfig,
    LoggingConfig,
    RecommendationConfig,
    config,
    load_config,
)

__all__ = [
    "FPLConfig",
    "RecommendationConfig",
    "CatalogConfig",
    "LoggingConfig",
    "config",
    "load_config",
]
