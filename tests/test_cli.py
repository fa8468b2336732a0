"""Tests for the command-line front end."""

import json
import sys
from unittest.mock import AsyncMock, patch

import pytest
from rich.console import Console

from variantexplorer.errors import ErrorKind
from variantexplorer.models.annotations import AnnotationBundle, AnnotationLayer, LayerOutcome
from variantexplorer.models.coordinates import GenomicCoordinates
from variantexplorer.models.result import ExplorationFailure, ExplorationResult
from variantexplorer.models.variant import GeneCdna
from variantexplorer.tools import explore_variant as cli


@pytest.fixture
def result():
    return ExplorationResult(
        query="BRCA1 c.99999A>G",
        parsed=GeneCdna(gene="BRCA1", change="c.99999A>G"),
        coordinates=GenomicCoordinates(
            chromosome="17",
            start=43044292,
            end=43170245,
            assembly="GRCh38",
            provenance="gene_fallback",
            approximate=True,
        ),
        annotations=AnnotationBundle(
            genome="hg38",
            chromosome="chr17",
            start=43044292,
            end=43170245,
            layers={
                AnnotationLayer.GENE_MODEL: LayerOutcome.present(AnnotationLayer.GENE_MODEL, {"knownGene": []}),
                AnnotationLayer.CONSERVATION: LayerOutcome.absent(AnnotationLayer.CONSERVATION, "timeout"),
            },
        ),
    )


class TestFormatting:
    def test_json(self, result):
        data = json.loads(cli.format_json(result, pretty=False))

        assert data["coordinates"]["approximate"] is True
        assert data["annotations"]["layers"]["conservation"]["note"] == "timeout"

    def test_table(self, result):
        console = Console(record=True, width=200)

        cli.format_table(result, console)

        text = console.export_text()
        assert "17:43044292-43170245" in text
        assert "approximate" in text
        assert "timeout" in text

    def test_failure_table(self):
        failure = ExplorationFailure(
            query="X c.1A>G",
            error=ErrorKind.ALL_STRATEGIES_EXHAUSTED,
            details="All resolution strategies failed for X c.1A>G",
            reasons=["gene_fallback: unknown gene"],
        )
        console = Console(record=True, width=200)

        cli.format_table(failure, console)

        text = console.export_text()
        assert "all_strategies_exhausted" in text
        assert "gene_fallback: unknown gene" in text


class TestMain:
    def test_failure_exits_nonzero(self, monkeypatch, capsys):
        failure = ExplorationFailure(query="junk", error=ErrorKind.MALFORMED, details="Unrecognized notation")
        monkeypatch.setattr(sys, "argv", ["variantexplorer", "junk", "--compact"])

        with patch.object(cli, "run", new_callable=AsyncMock) as mock_run, \
             patch.object(cli, "setup_logging"):
            mock_run.return_value = failure
            with pytest.raises(SystemExit) as exc_info:
                cli.main()

        assert exc_info.value.code == 1
        assert json.loads(capsys.readouterr().out)["error"] == "malformed"
