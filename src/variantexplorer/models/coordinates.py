"""Genomic coordinate and transcript models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator


class Strand(str, Enum):
    """Strand of a feature on the reference sequence."""

    PLUS = "+"
    MINUS = "-"
    UNKNOWN = "unknown"

    @classmethod
    def from_ensembl(cls, value: Any) -> "Strand":
        """Map Ensembl's ``1``/``-1`` strand encoding."""
        if value in (1, "1", "+"):
            return cls.PLUS
        if value in (-1, "-1", "-"):
            return cls.MINUS
        return cls.UNKNOWN


class TranscriptCandidate(BaseModel):
    """A transcript considered when resolving a gene-relative change."""

    id: str = Field(..., description="Transcript identifier (e.g., ENST00000357654)")
    is_canonical: bool = Field(default=False, description="Designated canonical by the gene model")
    gene: str = Field(..., description="Gene symbol the transcript was looked up from")


class GenomicCoordinates(BaseModel):
    """A resolved location on the reference assembly (1-based, inclusive)."""

    chromosome: str = Field(..., description="Reference sequence name without 'chr' prefix")
    start: int = Field(..., ge=1)
    end: int = Field(..., ge=1)
    strand: Strand = Strand.UNKNOWN
    allele: str | None = Field(None, description="Allele string or allele change, if known")
    assembly: str = Field(..., description="Assembly label (e.g., GRCh38)")
    provenance: str = Field(..., description="Resolution strategy that produced the coordinates")
    approximate: bool = Field(
        default=False, description="True when taken from gene bounds rather than the variant itself"
    )
    resolved_notation: str | None = Field(None, description="Notation the coordinates were derived from")
    transcript: str | None = Field(None, description="Transcript that produced the notation, if any")

    @model_validator(mode="after")
    def check_order(self) -> "GenomicCoordinates":
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) precedes start ({self.start})")
        return self

    @property
    def span(self) -> int:
        return self.end - self.start + 1

    def to_region(self) -> str:
        """Region string in Ensembl form, e.g. ``17:43044295-43125483``."""
        return f"{self.chromosome}:{self.start}-{self.end}"
