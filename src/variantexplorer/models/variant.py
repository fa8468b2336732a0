"""Parsed variant notation models.

A raw query string is classified into exactly one of five tagged shapes.
The ``kind`` field is the discriminator, so a ``ParsedVariant`` round-trips
through JSON without losing which shape it was.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Parsed(BaseModel):
    model_config = ConfigDict(frozen=True)


class GenomicHgvs(_Parsed):
    """Accession-qualified genomic HGVS, e.g. ``NC_000017.11:g.43124027_43124028del``."""

    kind: Literal["genomic_hgvs"] = "genomic_hgvs"
    notation: str


class CdnaHgvs(_Parsed):
    """Transcript-qualified coding (or protein) HGVS, e.g. ``NM_007294.4:c.68_69del``."""

    kind: Literal["cdna_hgvs"] = "cdna_hgvs"
    notation: str


class GeneCdna(_Parsed):
    """Gene symbol plus a bare coding change, e.g. ``BRCA1 c.68_69delAG``."""

    kind: Literal["gene_cdna"] = "gene_cdna"
    gene: str
    change: str


class RsId(_Parsed):
    """dbSNP reference SNP identifier, e.g. ``rs56116432``."""

    kind: Literal["rsid"] = "rsid"
    id: str


class Unrecognized(_Parsed):
    """Catch-all for input that matches no supported notation."""

    kind: Literal["unrecognized"] = "unrecognized"
    reason: str
    raw: str = ""


ParsedVariant = Annotated[
    Union[GenomicHgvs, CdnaHgvs, GeneCdna, RsId, Unrecognized],
    Field(discriminator="kind"),
]
