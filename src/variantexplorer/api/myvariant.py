"""MyVariant.info client used for gene-filtered variation search.

The GeneCdna heuristic asks MyVariant for records matching ``<gene> <change>``
and keeps hits annotated with that gene whose coding HGVS synonyms
contain the change text.
"""

import logging
from typing import Any

from variantexplorer.api.client import ResilientClient

logger = logging.getLogger(__name__)

SEARCH_FIELDS = [
    "dbsnp.rsid",
    "dbsnp.gene.symbol",
    "clinvar.rsid",
    "clinvar.gene.symbol",
    "clinvar.hgvs.coding",
]


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    return value if isinstance(value, list) else [value]


def hit_gene_symbols(hit: dict[str, Any]) -> set[str]:
    """Collect gene symbols attached to a MyVariant hit."""
    symbols: set[str] = set()
    for source in ("dbsnp", "clinvar"):
        for gene in _as_list((hit.get(source) or {}).get("gene")):
            if isinstance(gene, dict) and gene.get("symbol"):
                symbols.add(str(gene["symbol"]).upper())
    return symbols


def hit_synonyms(hit: dict[str, Any]) -> list[str]:
    """Coding HGVS synonyms recorded for a hit."""
    hgvs = (hit.get("clinvar") or {}).get("hgvs") or {}
    if not isinstance(hgvs, dict):
        return []
    return [str(s) for s in _as_list(hgvs.get("coding"))]


def hit_rsid(hit: dict[str, Any]) -> str | None:
    for source in ("dbsnp", "clinvar"):
        rsid = (hit.get(source) or {}).get("rsid")
        if rsid:
            return str(rsid)
    return None


class MyVariantClient:
    """Client for the MyVariant.info query endpoint."""

    def __init__(self, caller: ResilientClient) -> None:
        self.caller = caller
        self.base_url = caller.settings.myvariant_base_url

    async def search(self, query: str, size: int = 10) -> list[dict[str, Any]]:
        """Free-text query returning raw hits."""
        data = await self.caller.call(
            f"{self.base_url}/query",
            params={"q": query, "fields": ",".join(SEARCH_FIELDS), "size": size},
        )
        return list(data.get("hits", [])) if isinstance(data, dict) else []

    async def find_rsid_by_synonym(self, gene: str, change: str) -> str | None:
        """Find an rsID whose coding synonyms contain ``change`` within ``gene``.

        Substring matching can hit unrelated records that share the change
        text; callers treat the answer as a hint, not a verified identity.
        """
        hits = await self.search(f"{gene} {change}")
        gene_upper = gene.upper()

        for hit in hits:
            if gene_upper not in hit_gene_symbols(hit):
                continue
            if not any(change in synonym for synonym in hit_synonyms(hit)):
                continue
            rsid = hit_rsid(hit)
            if rsid:
                logger.info(f"Synonym match for {gene} {change}: {rsid}")
                return rsid

        return None
