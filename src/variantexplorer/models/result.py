"""Top-level exploration result models."""

from pydantic import BaseModel, Field

from variantexplorer.errors import ErrorKind
from variantexplorer.models.annotations import AnnotationBundle
from variantexplorer.models.coordinates import GenomicCoordinates
from variantexplorer.models.variant import ParsedVariant


class ExplorationResult(BaseModel):
    """Successful exploration: parsed input, resolved location and annotations."""

    query: str
    parsed: ParsedVariant
    coordinates: GenomicCoordinates
    annotations: AnnotationBundle

    @property
    def ok(self) -> bool:
        return True


class ExplorationFailure(BaseModel):
    """Structured request-level failure."""

    query: str = Field(..., description="Original query, echoed back")
    error: ErrorKind
    details: str
    reasons: list[str] = Field(default_factory=list, description="Per-strategy failure reasons")

    @property
    def ok(self) -> bool:
        return False
