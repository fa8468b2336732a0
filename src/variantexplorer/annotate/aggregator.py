"""Annotation aggregation: GenomicCoordinates → AnnotationBundle.

ARCHITECTURE:
    coordinates → chr-prefixed chromosome + clamped window
                → gene model | conservation | known variants | clinical significance (asyncio.gather)
                → AnnotationBundle (fixed layer order)

Key Design:
- The four track fetches run concurrently and each owns its retry budget
- A failing layer is recorded as absent; it never cancels the others
- aggregate() never raises for upstream failures
"""

import asyncio
import logging

from variantexplorer.api.ucsc import UCSCClient
from variantexplorer.config import Settings
from variantexplorer.models.annotations import AnnotationBundle, AnnotationLayer, LayerOutcome
from variantexplorer.models.coordinates import GenomicCoordinates

logger = logging.getLogger(__name__)

MITOCHONDRIAL_NAMES = {"MT", "M", "CHRM", "CHRMT"}


def normalize_chromosome(name: str) -> str:
    """Return the UCSC form of a chromosome name (``17`` → ``chr17``, ``MT`` → ``chrM``)."""
    value = str(name).strip()
    if value.upper() in MITOCHONDRIAL_NAMES:
        return "chrM"
    if value.lower().startswith("chr"):
        return "chr" + value[3:]
    return f"chr{value}"


def clamp_region(start: int, end: int, max_span: int) -> tuple[int, int]:
    """Limit a 1-based inclusive window to ``max_span`` bases, keeping ``end``."""
    if end - start + 1 > max_span:
        return end - max_span + 1, end
    return start, end


class AnnotationAggregator:
    """Fetches the annotation layers for a resolved location."""

    def __init__(self, ucsc: UCSCClient, settings: Settings | None = None) -> None:
        self.ucsc = ucsc
        self.settings = settings or ucsc.settings

    def track_for(self, layer: AnnotationLayer) -> str | None:
        return self.settings.tracks.get(layer.value)

    async def aggregate(self, coordinates: GenomicCoordinates) -> AnnotationBundle:
        """Fetch every layer for ``coordinates`` and merge the outcomes."""
        chrom = normalize_chromosome(coordinates.chromosome)
        start, end = clamp_region(coordinates.start, coordinates.end, self.settings.max_region_span)

        if (start, end) != (coordinates.start, coordinates.end):
            logger.info(
                f"Clamped {coordinates.to_region()} ({coordinates.span} bp) to {chrom}:{start}-{end}"
            )

        layers = list(AnnotationLayer)
        outcomes = await asyncio.gather(
            *(self._fetch_layer(layer, chrom, start, end) for layer in layers)
        )

        bundle = AnnotationBundle(
            genome=self.settings.ucsc_genome,
            chromosome=chrom,
            start=start,
            end=end,
            layers=dict(zip(layers, outcomes)),
            browser_url=self.ucsc.browser_url(chrom, start, end),
        )

        logger.info(
            f"Annotated {chrom}:{start}-{end}: "
            f"{len(bundle.present_layers())}/{len(layers)} layers present"
        )
        return bundle

    async def _fetch_layer(
        self, layer: AnnotationLayer, chrom: str, start: int, end: int
    ) -> LayerOutcome:
        track = self.track_for(layer)
        if track is None:
            return LayerOutcome.absent(layer, f"no track configured for {layer.value}")

        try:
            payload = await self.ucsc.get_track(track, chrom, start, end)
        except Exception as e:
            logger.warning(f"{layer.value} ({track}) unavailable: {e}")
            return LayerOutcome.absent(layer, f"{track}: {e}")

        return LayerOutcome.present(layer, payload)
