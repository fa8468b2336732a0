"""UCSC Genome Browser API client for annotation tracks.

``getData/track`` takes 0-based half-open coordinates, so a 1-based
inclusive window [start, end] is sent as start-1..end.
"""

import logging
from typing import Any

from variantexplorer.api.client import ResilientClient

logger = logging.getLogger(__name__)


class UCSCClient:
    """Client for UCSC track data and browser links."""

    def __init__(self, caller: ResilientClient) -> None:
        self.caller = caller
        self.settings = caller.settings
        self.api_url = self.settings.ucsc_api_url

    async def get_track(
        self,
        track: str,
        chrom: str,
        start: int,
        end: int,
        genome: str | None = None,
        max_attempts: int | None = None,
    ) -> dict[str, Any]:
        """Fetch one track over a 1-based inclusive window.

        Args:
            track: UCSC track name (e.g., "knownGene")
            chrom: Chromosome in UCSC form (e.g., "chr17")
            start: 1-based start
            end: 1-based end
            genome: UCSC database (default from settings)
            max_attempts: Retry budget for this track

        Returns:
            Raw track payload
        """
        params = {
            "genome": genome or self.settings.ucsc_genome,
            "track": track,
            "chrom": chrom,
            "start": start - 1,
            "end": end,
        }
        logger.debug(f"UCSC {track} {chrom}:{start}-{end}")
        return await self.caller.call(f"{self.api_url}/getData/track", params=params, max_attempts=max_attempts)

    def browser_url(self, chrom: str, start: int, end: int, genome: str | None = None) -> str:
        db = genome or self.settings.ucsc_genome
        return f"{self.settings.ucsc_browser_url}?db={db}&position={chrom}:{start}-{end}"
