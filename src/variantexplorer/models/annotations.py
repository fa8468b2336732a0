"""Annotation bundle models."""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field


class AnnotationLayer(str, Enum):
    """Annotation layers, in the order they appear in a bundle."""

    GENE_MODEL = "gene_model"
    CONSERVATION = "conservation"
    KNOWN_VARIANTS = "known_variants"
    CLINICAL_SIGNIFICANCE = "clinical_significance"


class LayerOutcome(BaseModel):
    """Result of fetching one layer: the raw payload, or an absence marker with a note."""

    layer: AnnotationLayer
    status: Literal["present", "absent"]
    payload: Any = None
    note: str | None = None

    @classmethod
    def present(cls, layer: AnnotationLayer, payload: Any) -> "LayerOutcome":
        return cls(layer=layer, status="present", payload=payload)

    @classmethod
    def absent(cls, layer: AnnotationLayer, note: str) -> "LayerOutcome":
        return cls(layer=layer, status="absent", note=note)

    @property
    def is_present(self) -> bool:
        return self.status == "present"


class AnnotationBundle(BaseModel):
    """Merged annotation layers for one queried window.

    ``start``/``end`` are the effective window sent to the track services,
    which may be narrower than the resolved coordinates.
    """

    genome: str = Field(..., description="UCSC database name (e.g., hg38)")
    chromosome: str = Field(..., description="Chromosome as sent to the track services (e.g., chr17)")
    start: int
    end: int
    layers: dict[AnnotationLayer, LayerOutcome] = Field(default_factory=dict)
    browser_url: str | None = Field(None, description="UCSC Genome Browser link for the window")

    def get(self, layer: AnnotationLayer) -> LayerOutcome:
        return self.layers[layer]

    def present_layers(self) -> list[AnnotationLayer]:
        return [layer for layer, outcome in self.layers.items() if outcome.is_present]

    def absent_layers(self) -> list[AnnotationLayer]:
        return [layer for layer, outcome in self.layers.items() if not outcome.is_present]
