"""Utilities for variantexplorer."""

from variantexplorer.utils.logging_config import setup_logging

__all__ = ["setup_logging"]
