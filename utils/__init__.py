"""
Utility modules for the valuation service.
"""

from .formatting import format_currency, format_lakh, format_percent
from .config import Config

__all__ = ["format_currency", "format_lakh", "format_percent", "Config"]
