"""Configuration module for variantexplorer."""

from variantexplorer.config.settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
