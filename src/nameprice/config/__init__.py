"""
Configuration Module

Provides centralized configuration management using Pydantic Settings,
plus the static per-currency format table.
"""

from nameprice.config.settings import Settings, settings
from nameprice.config.currencies import PRICE_CURRENCY_FORMAT, currency_format

__all__ = ["Settings", "settings", "PRICE_CURRENCY_FORMAT", "currency_format"]
