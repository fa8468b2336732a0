"""Tests for variant notation classification."""

import pytest

from variantexplorer.classifier import classify
from variantexplorer.models.variant import CdnaHgvs, GeneCdna, GenomicHgvs, RsId, Unrecognized


class TestAccessionHgvs:
    """Accession-qualified notation."""

    def test_genomic_hgvs(self):
        parsed = classify("NC_000017.11:g.43124027_43124028del")
        assert parsed == GenomicHgvs(notation="NC_000017.11:g.43124027_43124028del")

    def test_coding_hgvs(self):
        parsed = classify("NM_007294.4:c.68_69del")
        assert isinstance(parsed, CdnaHgvs)
        assert parsed.notation == "NM_007294.4:c.68_69del"

    def test_protein_hgvs_is_transcript_qualified(self):
        parsed = classify("NP_009225.1:p.Glu23fs")
        assert isinstance(parsed, CdnaHgvs)

    def test_surrounding_whitespace_is_ignored(self):
        parsed = classify("  NC_000007.14:g.140753336A>T \n")
        assert parsed == GenomicHgvs(notation="NC_000007.14:g.140753336A>T")

    def test_accession_without_version_is_not_hgvs(self):
        assert isinstance(classify("NM_007294:c.68_69del"), Unrecognized)


class TestGeneCdna:
    """Gene symbol + coding change."""

    def test_space_separated(self):
        parsed = classify("BRCA1 c.68_69delAG")
        assert parsed == GeneCdna(gene="BRCA1", change="c.68_69delAG")

    def test_colon_separated(self):
        parsed = classify("BRCA1:c.5266dupC")
        assert parsed == GeneCdna(gene="BRCA1", change="c.5266dupC")

    def test_hyphenated_symbol(self):
        parsed = classify("HLA-A c.100G>A")
        assert isinstance(parsed, GeneCdna)
        assert parsed.gene == "HLA-A"

    def test_gene_with_protein_change_is_unrecognized(self):
        assert isinstance(classify("BRAF p.V600E"), Unrecognized)


class TestRsId:
    """Reference SNP identifiers."""

    def test_rsid(self):
        assert classify("rs56116432") == RsId(id="rs56116432")

    @pytest.mark.parametrize("raw", ["rs", "rs12a", "rsX123", "RS56116432", "56116432"])
    def test_strict_rsid_pattern(self, raw):
        assert isinstance(classify(raw), Unrecognized)


class TestTotality:
    """Classification never raises and is deterministic."""

    @pytest.mark.parametrize(
        "raw",
        ["", "   ", "hello world", "chr17:43124027", ":::", "c.68_69del", "BRCA1", "\x00", "🧬"],
    )
    def test_always_returns_a_variant(self, raw):
        parsed = classify(raw)
        assert isinstance(parsed, Unrecognized)
        assert parsed.reason

    def test_non_string_input(self):
        parsed = classify(None)  # type: ignore[arg-type]
        assert isinstance(parsed, Unrecognized)

    @pytest.mark.parametrize(
        "raw",
        ["rs56116432", "BRCA1 c.68_69delAG", "NM_007294.4:c.68_69del", "junk"],
    )
    def test_deterministic(self, raw):
        assert classify(raw) == classify(raw)
