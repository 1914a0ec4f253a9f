"""
Configuration Package
Runtime settings for the catalog matching engine.
"""

from .settings import Settings, get_settings, reset_settings

__all__ = ["Settings", "get_settings", "reset_settings"]
