"""Shared fixtures for variantexplorer tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from variantexplorer.api.ensembl import EnsemblClient
from variantexplorer.api.myvariant import MyVariantClient
from variantexplorer.config import Settings


@pytest.fixture
def settings():
    """Default settings (no YAML, no environment)."""
    return Settings()


@pytest.fixture
def rs56116432_payload():
    """Ensembl /variation response for rs56116432."""
    return {
        "name": "rs56116432",
        "var_class": "SNP",
        "mappings": [
            {
                "location": "9:133256042-133256042",
                "assembly_name": "GRCh38",
                "end": 133256042,
                "seq_region_name": "9",
                "strand": 1,
                "coord_system": "chromosome",
                "allele_string": "C/T",
                "start": 133256042,
            }
        ],
    }


@pytest.fixture
def brca1_lookup_payload():
    """Ensembl /lookup/symbol response for BRCA1 with expand=1."""
    return {
        "id": "ENSG00000012048",
        "display_name": "BRCA1",
        "seq_region_name": "17",
        "start": 43044292,
        "end": 43170245,
        "strand": -1,
        "assembly_name": "GRCh38",
        "Transcript": [
            {"id": "ENST00000461574", "is_canonical": 0},
            {"id": "ENST00000357654", "is_canonical": 1},
            {"id": "ENST00000468300", "is_canonical": 0},
            {"id": "ENST00000644379", "is_canonical": 0},
        ],
    }


@pytest.fixture
def brca1_recoder_payload():
    """Ensembl /variant_recoder response for BRCA1 c.68_69del."""
    return [
        {
            "-": {
                "input": "ENST00000357654:c.68_69delAG",
                "hgvsg": ["NC_000017.11:g.43124027_43124028del"],
                "hgvsc": ["ENST00000357654.9:c.68_69del"],
                "hgvsp": ["ENSP00000350283.3:p.Glu23ValfsTer17"],
                "spdi": ["NC_000017.11:43124026:CT:"],
                "id": ["rs80357713", "CD972058"],
            }
        }
    ]


@pytest.fixture
def vep_payload():
    """First record of an Ensembl /vep/human/hgvs response."""
    return {
        "input": "NM_007294.4:c.68_69del",
        "seq_region_name": "17",
        "start": 43124027,
        "end": 43124028,
        "strand": 1,
        "allele_string": "CT/-",
        "assembly_name": "GRCh38",
    }


@pytest.fixture
def fake_ensembl(settings):
    """EnsemblClient stand-in with every endpoint as an AsyncMock."""
    ensembl = MagicMock(spec=EnsemblClient)
    ensembl.settings = settings
    ensembl.lookup_symbol = AsyncMock()
    ensembl.variant_recoder = AsyncMock()
    ensembl.variation = AsyncMock()
    ensembl.vep_hgvs = AsyncMock()
    return ensembl


@pytest.fixture
def fake_myvariant():
    """MyVariantClient stand-in that never finds a synonym match."""
    myvariant = MagicMock(spec=MyVariantClient)
    myvariant.find_rsid_by_synonym = AsyncMock(return_value=None)
    return myvariant


@pytest.fixture
def track_payload():
    """UCSC getData/track response shape."""
    return {
        "genome": "hg38",
        "track": "knownGene",
        "chrom": "chr9",
        "start": 133256041,
        "end": 133256042,
        "knownGene": [{"name": "ENST00000372348.9", "geneName": "ABL1"}],
    }
