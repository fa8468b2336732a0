"""Tests for data models."""

import pytest
from pydantic import TypeAdapter, ValidationError

from variantexplorer.errors import ErrorKind
from variantexplorer.models.annotations import AnnotationBundle, AnnotationLayer, LayerOutcome
from variantexplorer.models.coordinates import GenomicCoordinates, Strand
from variantexplorer.models.result import ExplorationFailure
from variantexplorer.models.variant import CdnaHgvs, GeneCdna, ParsedVariant, RsId, Unrecognized


class TestParsedVariant:
    """Tests for the tagged variant union."""

    def test_discriminated_round_trip(self):
        adapter = TypeAdapter(ParsedVariant)
        variant = GeneCdna(gene="BRCA1", change="c.68_69delAG")

        restored = adapter.validate_python(variant.model_dump())

        assert isinstance(restored, GeneCdna)
        assert restored == variant

    def test_kind_selects_shape(self):
        adapter = TypeAdapter(ParsedVariant)
        assert isinstance(adapter.validate_python({"kind": "rsid", "id": "rs1"}), RsId)
        assert isinstance(adapter.validate_python({"kind": "cdna_hgvs", "notation": "NM_1.1:c.1A>G"}), CdnaHgvs)

    def test_frozen(self):
        variant = RsId(id="rs56116432")
        with pytest.raises(ValidationError):
            variant.id = "rs1"

    def test_unrecognized_defaults(self):
        assert Unrecognized(reason="empty input").raw == ""


class TestGenomicCoordinates:
    """Tests for GenomicCoordinates."""

    def test_point_location(self):
        coords = GenomicCoordinates(
            chromosome="9", start=133256042, end=133256042, assembly="GRCh38", provenance="rsid_direct"
        )

        assert coords.span == 1
        assert coords.to_region() == "9:133256042-133256042"
        assert coords.strand == Strand.UNKNOWN
        assert coords.approximate is False

    def test_end_before_start_rejected(self):
        with pytest.raises(ValidationError):
            GenomicCoordinates(chromosome="9", start=10, end=9, assembly="GRCh38", provenance="x")

    def test_zero_start_rejected(self):
        with pytest.raises(ValidationError):
            GenomicCoordinates(chromosome="9", start=0, end=9, assembly="GRCh38", provenance="x")

    @pytest.mark.parametrize("value,expected", [(1, Strand.PLUS), (-1, Strand.MINUS), ("-1", Strand.MINUS), (None, Strand.UNKNOWN)])
    def test_strand_from_ensembl(self, value, expected):
        assert Strand.from_ensembl(value) == expected


class TestAnnotationBundle:
    """Tests for AnnotationBundle."""

    def test_present_and_absent(self):
        bundle = AnnotationBundle(
            genome="hg38",
            chromosome="chr9",
            start=1,
            end=2,
            layers={
                AnnotationLayer.GENE_MODEL: LayerOutcome.present(AnnotationLayer.GENE_MODEL, {"knownGene": []}),
                AnnotationLayer.CONSERVATION: LayerOutcome.absent(AnnotationLayer.CONSERVATION, "timeout"),
            },
        )

        assert bundle.present_layers() == [AnnotationLayer.GENE_MODEL]
        assert bundle.absent_layers() == [AnnotationLayer.CONSERVATION]
        assert bundle.get(AnnotationLayer.CONSERVATION).note == "timeout"

    def test_json_keys_are_layer_names(self):
        bundle = AnnotationBundle(
            genome="hg38",
            chromosome="chr9",
            start=1,
            end=2,
            layers={AnnotationLayer.GENE_MODEL: LayerOutcome.absent(AnnotationLayer.GENE_MODEL, "x")},
        )

        data = bundle.model_dump(mode="json")

        assert list(data["layers"]) == ["gene_model"]
        assert data["layers"]["gene_model"]["status"] == "absent"


class TestExplorationFailure:
    def test_serializes_error_kind(self):
        failure = ExplorationFailure(query="rs0", error=ErrorKind.NOT_FOUND, details="no mapping")

        data = failure.model_dump(mode="json")

        assert data["error"] == "not_found"
        assert data["reasons"] == []
        assert failure.ok is False
