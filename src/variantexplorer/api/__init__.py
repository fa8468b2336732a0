"""API clients for external data sources."""

from variantexplorer.api.client import ResilientClient
from variantexplorer.api.ensembl import EnsemblClient
from variantexplorer.api.myvariant import MyVariantClient
from variantexplorer.api.ucsc import UCSCClient

__all__ = ["ResilientClient", "EnsemblClient", "MyVariantClient", "UCSCClient"]
