"""variantexplorer: resolve variant notation to genomic coordinates and aggregate annotations."""

from variantexplorer.classifier import classify
from variantexplorer.config import Settings, load_settings
from variantexplorer.engine import VariantExplorer, explore_variant

__version__ = "0.1.0"

__all__ = ["classify", "Settings", "load_settings", "VariantExplorer", "explore_variant"]
