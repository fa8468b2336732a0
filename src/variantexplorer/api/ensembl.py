"""Ensembl REST API client for gene, variation and recoding lookups.

Endpoints used:
- /lookup/symbol/{species}/{symbol}    gene coordinates, optional transcript list
- /variant_recoder/human/{notation}    per-allele hgvsg/hgvsc/hgvsp/spdi/id records
- /variation/human/{id}                assembly-tagged mappings and allele string
- /vep/human/hgvs/{notation}           direct variant lookup (last-resort coordinates)

Rate limits: 15 requests/second without authentication token.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from variantexplorer.api.client import ResilientClient
from variantexplorer.errors import NotFoundError

logger = logging.getLogger(__name__)

NOT_FOUND_STATUSES = {400, 404}


class EnsemblClient:
    """Thin wrapper over the Ensembl REST endpoints used for resolution."""

    def __init__(self, caller: ResilientClient) -> None:
        self.caller = caller
        self.settings = caller.settings
        self.base_url = self.settings.ensembl_base_url

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        query = {"content-type": "application/json"}
        if params:
            query.update(params)

        try:
            return await self.caller.call(f"{self.base_url}{path}", params=query)
        except httpx.HTTPStatusError as e:
            if e.response.status_code in NOT_FOUND_STATUSES:
                raise NotFoundError(f"Ensembl has no record for {path} ({e.response.status_code})") from e
            raise

    async def lookup_symbol(self, gene: str, expand: bool = False) -> dict[str, Any]:
        """Look up a gene by symbol.

        Args:
            gene: Gene symbol (e.g., "BRCA1")
            expand: Include the ``Transcript`` list

        Returns:
            Gene record with seq_region_name, start, end, strand, assembly_name
        """
        params = {"expand": 1} if expand else None
        data = await self._get(f"/lookup/symbol/{self.settings.species}/{quote(gene, safe='')}", params)
        if not isinstance(data, dict) or "seq_region_name" not in data:
            raise NotFoundError(f"No gene record for symbol {gene}")
        return data

    async def variant_recoder(self, notation: str) -> list[dict[str, Any]]:
        """Recode a notation into all equivalent representations."""
        data = await self._get(f"/variant_recoder/human/{quote(notation, safe='')}")
        if not isinstance(data, list) or not data:
            raise NotFoundError(f"Variant recoder returned nothing for {notation}")
        return data

    async def variation(self, variant_id: str) -> dict[str, Any]:
        """Fetch a variation record (mappings, allele string) by id."""
        data = await self._get(f"/variation/human/{quote(variant_id, safe='')}")
        if not isinstance(data, dict):
            raise NotFoundError(f"No variation record for {variant_id}")
        return data

    async def vep_hgvs(self, notation: str) -> dict[str, Any]:
        """Run VEP on a single HGVS notation and return the first consequence record."""
        data = await self._get(f"/vep/human/hgvs/{quote(notation, safe='')}")
        if not isinstance(data, list) or not data:
            raise NotFoundError(f"VEP returned nothing for {notation}")
        return data[0]
