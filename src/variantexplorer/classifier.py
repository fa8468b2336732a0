"""Classify raw variant queries into tagged notation shapes.

Checks run in a fixed order and the first match wins:
1. Accession-qualified HGVS (``NC_000017.11:g.``, ``NM_007294.4:c.``, ``NP_...:p.``)
2. Gene symbol + coding change (``BRCA1 c.68_69delAG``, ``BRCA1:c.68_69delAG``)
3. rsID (``rs56116432``), digits only after the prefix
4. Anything else is Unrecognized

Classification never raises and performs no I/O.
"""

import re

from variantexplorer.models.variant import (
    CdnaHgvs,
    GeneCdna,
    GenomicHgvs,
    ParsedVariant,
    RsId,
    Unrecognized,
)

ACCESSION_HGVS_PATTERN = re.compile(r"^([A-Za-z0-9_]+)\.(\d+):([gcp])\.(\S+)$")
GENE_CDNA_PATTERN = re.compile(r"^([A-Za-z][A-Za-z0-9-]*)(?:\s+|\s*:\s*)(c\.\S+)$")
RSID_PATTERN = re.compile(r"^rs[0-9]+$")


def classify(raw: str) -> ParsedVariant:
    """Map a raw query string to exactly one ParsedVariant shape.

    Args:
        raw: Query as given by the caller

    Returns:
        GenomicHgvs, CdnaHgvs, GeneCdna, RsId or Unrecognized
    """
    if not isinstance(raw, str):
        return Unrecognized(reason=f"expected a string, got {type(raw).__name__}", raw=str(raw))

    text = raw.strip()
    if not text:
        return Unrecognized(reason="empty query", raw=raw)

    match = ACCESSION_HGVS_PATTERN.match(text)
    if match:
        if match.group(3) == "g":
            return GenomicHgvs(notation=text)
        return CdnaHgvs(notation=text)

    match = GENE_CDNA_PATTERN.match(text)
    if match:
        return GeneCdna(gene=match.group(1), change=match.group(2))

    if RSID_PATTERN.match(text):
        return RsId(id=text)

    return Unrecognized(reason=f"no supported notation matches {text!r}", raw=raw)
