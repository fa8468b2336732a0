"""Core exploration engine combining classification, resolution and annotation.

ARCHITECTURE:
    query → classify (→ optional LLM extraction) → NotationResolver → GenomicCoordinates
          → AnnotationAggregator → ExplorationResult

Key Design:
- Async context manager for HTTP session lifecycle
- Sequential resolution, concurrent annotation (asyncio.gather inside the aggregator)
- Request-level failures returned as ExplorationFailure, never raised
- Stateless per request; all clients share one ResilientClient
"""

import logging

import httpx

from variantexplorer.annotate.aggregator import AnnotationAggregator
from variantexplorer.api.client import ResilientClient
from variantexplorer.api.ensembl import EnsemblClient
from variantexplorer.api.myvariant import MyVariantClient
from variantexplorer.api.ucsc import UCSCClient
from variantexplorer.classifier import classify
from variantexplorer.config import Settings, load_settings
from variantexplorer.errors import ErrorKind, ResolutionError
from variantexplorer.llm.extractor import HGVSExtractor
from variantexplorer.models.result import ExplorationFailure, ExplorationResult
from variantexplorer.models.variant import ParsedVariant, Unrecognized
from variantexplorer.resolve.resolver import NotationResolver
from variantexplorer.resolve.transcripts import TranscriptResolver

logger = logging.getLogger(__name__)


class VariantExplorer:
    """
    Engine for variant exploration.

    Use with ``async with`` so the shared HTTP session is closed afterwards.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        caller: ResilientClient | None = None,
        extractor: HGVSExtractor | None = None,
    ):
        self.settings = settings or load_settings()
        self.caller = caller or ResilientClient(self.settings)

        self.ensembl = EnsemblClient(self.caller)
        self.myvariant = MyVariantClient(self.caller)
        self.ucsc = UCSCClient(self.caller)

        self.transcripts = TranscriptResolver(self.ensembl, self.settings.max_transcript_candidates)
        self.resolver = NotationResolver(self.ensembl, self.transcripts, self.myvariant, self.settings)
        self.aggregator = AnnotationAggregator(self.ucsc, self.settings)

        if extractor is None and self.settings.enable_llm_extraction:
            extractor = HGVSExtractor(model=self.settings.llm_model)
        self.extractor = extractor

    async def __aenter__(self):
        await self.caller.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Close HTTP client session to prevent resource leaks."""
        await self.caller.__aexit__(exc_type, exc_val, exc_tb)

    async def classify_query(self, query: str) -> ParsedVariant:
        """Classify ``query``, asking the extractor once if it is unrecognized."""
        parsed = classify(query)

        if isinstance(parsed, Unrecognized) and self.extractor is not None:
            notation = await self.extractor.extract(query)
            parsed = classify(notation)
            logger.info(f"Re-classified {query!r} as {parsed.kind} via extraction")

        return parsed

    async def explore_variant(self, query: str) -> ExplorationResult | ExplorationFailure:
        """Resolve ``query`` to coordinates and aggregate annotations.

        Returns:
            ExplorationResult on success, ExplorationFailure with an error kind
            and detail otherwise
        """
        logger.info(f"Exploring variant query: {query!r}")

        try:
            parsed = await self.classify_query(query)
            coordinates = await self.resolver.resolve(parsed)
        except ResolutionError as e:
            logger.warning(f"Resolution failed for {query!r}: {e.kind.value}: {e.detail}")
            return ExplorationFailure(query=query, error=e.kind, details=e.detail, reasons=e.reasons)
        except httpx.HTTPError as e:
            logger.warning(f"Upstream failure for {query!r}: {e}")
            return ExplorationFailure(
                query=query,
                error=ErrorKind.UPSTREAM_UNAVAILABLE,
                details=f"Upstream service unavailable: {e}",
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Unexpected upstream payload for {query!r}: {e}", exc_info=True)
            return ExplorationFailure(
                query=query,
                error=ErrorKind.UPSTREAM_UNAVAILABLE,
                details=f"Unexpected upstream payload: {e}",
            )

        logger.info(
            f"Resolved {query!r} to {coordinates.to_region()} "
            f"({coordinates.provenance}{', approximate' if coordinates.approximate else ''})"
        )

        annotations = await self.aggregator.aggregate(coordinates)

        return ExplorationResult(
            query=query,
            parsed=parsed,
            coordinates=coordinates,
            annotations=annotations,
        )


async def explore_variant(query: str, settings: Settings | None = None) -> ExplorationResult | ExplorationFailure:
    """Convenience function for a single query.

    Creates a new VariantExplorer (and HTTP session) per call.
    """
    async with VariantExplorer(settings=settings) as explorer:
        return await explorer.explore_variant(query)
