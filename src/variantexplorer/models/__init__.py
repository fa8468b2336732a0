"""Data models for variantexplorer."""

from variantexplorer.models.annotations import AnnotationBundle, AnnotationLayer, LayerOutcome
from variantexplorer.models.coordinates import GenomicCoordinates, Strand, TranscriptCandidate
from variantexplorer.models.result import ExplorationFailure, ExplorationResult
from variantexplorer.models.variant import (
    CdnaHgvs,
    GeneCdna,
    GenomicHgvs,
    ParsedVariant,
    RsId,
    Unrecognized,
)

__all__ = [
    "ParsedVariant",
    "GenomicHgvs",
    "CdnaHgvs",
    "GeneCdna",
    "RsId",
    "Unrecognized",
    "Strand",
    "TranscriptCandidate",
    "GenomicCoordinates",
    "AnnotationLayer",
    "LayerOutcome",
    "AnnotationBundle",
    "ExplorationResult",
    "ExplorationFailure",
]
