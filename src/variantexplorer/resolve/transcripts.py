"""Gene symbol → ranked transcript candidates and gene-level coordinates."""

import logging
from typing import Any

from variantexplorer.api.ensembl import EnsemblClient
from variantexplorer.errors import NotFoundError
from variantexplorer.models.coordinates import GenomicCoordinates, Strand, TranscriptCandidate

logger = logging.getLogger(__name__)

GENE_FALLBACK = "gene_fallback"


def rank_transcripts(
    gene: str, transcripts: list[dict[str, Any]], limit: int = 3
) -> list[TranscriptCandidate]:
    """Rank transcripts canonical-first, then in source order, capped at ``limit``.

    When no transcript is flagged canonical the first one stands in.
    """
    records = [t for t in transcripts if isinstance(t, dict) and t.get("id")]
    if not records:
        return []

    canonical_index = next(
        (i for i, t in enumerate(records) if t.get("is_canonical") in (1, True, "1")),
        0,
    )

    ordered = [records[canonical_index]] + [t for i, t in enumerate(records) if i != canonical_index]

    return [
        TranscriptCandidate(id=str(t["id"]), is_canonical=(i == 0), gene=gene)
        for i, t in enumerate(ordered[:limit])
    ]


class TranscriptResolver:
    """Looks up genes by symbol (human) and ranks their transcripts."""

    def __init__(self, ensembl: EnsemblClient, max_candidates: int = 3) -> None:
        self.ensembl = ensembl
        self.max_candidates = max_candidates

    async def resolve_transcripts(self, gene: str) -> list[TranscriptCandidate]:
        """Return at most ``max_candidates`` transcripts, canonical first.

        Raises:
            NotFoundError: The gene has no transcripts
        """
        data = await self.ensembl.lookup_symbol(gene, expand=True)
        candidates = rank_transcripts(gene, data.get("Transcript") or [], self.max_candidates)

        if not candidates:
            raise NotFoundError(f"No transcripts found for gene {gene}")

        logger.debug(f"{gene} transcripts: {[c.id for c in candidates]}")
        return candidates

    async def gene_coordinates(self, gene: str) -> GenomicCoordinates:
        """Whole-gene coordinates, flagged approximate."""
        data = await self.ensembl.lookup_symbol(gene)

        return GenomicCoordinates(
            chromosome=str(data["seq_region_name"]),
            start=int(data["start"]),
            end=int(data["end"]),
            strand=Strand.from_ensembl(data.get("strand")),
            assembly=data.get("assembly_name") or self.ensembl.settings.assembly,
            provenance=GENE_FALLBACK,
            approximate=True,
            resolved_notation=gene,
        )
