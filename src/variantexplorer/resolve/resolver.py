"""Notation resolution: ParsedVariant → GenomicCoordinates.

ARCHITECTURE:
    RsId        → variation lookup, pick the target-assembly mapping
    GenomicHgvs → numeric rsID → variant recoder → variation lookup → VEP → gene bounds
    CdnaHgvs    → same chain as GenomicHgvs
    GeneCdna    → synonym search → per-transcript recoder → gene bounds
    Unrecognized→ MalformedVariantError

Strategies run one at a time through ``run_chain``; retries happen only
inside the ResilientClient. Gene-bound results are flagged ``approximate``.
"""

import logging
import re
from functools import partial
from typing import Any

from variantexplorer.api.ensembl import EnsemblClient
from variantexplorer.api.myvariant import MyVariantClient
from variantexplorer.config import Settings
from variantexplorer.errors import MalformedVariantError, NotFoundError
from variantexplorer.models.coordinates import GenomicCoordinates, Strand, TranscriptCandidate
from variantexplorer.models.variant import (
    CdnaHgvs,
    GeneCdna,
    GenomicHgvs,
    ParsedVariant,
    RsId,
    Unrecognized,
)
from variantexplorer.resolve.chain import Strategy, run_chain
from variantexplorer.resolve.transcripts import TranscriptResolver

logger = logging.getLogger(__name__)

# Provenance labels
RSID_DIRECT = "rsid_direct"
RSID_NUMERIC = "rsid_numeric"
VARIANT_RECODER = "variant_recoder"
VARIATION_LOOKUP = "variation_lookup"
VEP_DIRECT = "vep_direct"

# Recoder fields in order of preference
RECODER_FIELDS = ("hgvsg", "hgvsc", "hgvsp", "spdi", "id")

HGVSG_PATTERN = re.compile(r"^NC_0*(\d+)\.\d+:g\.(\d+)(.*)$")
RSID_PATTERN = re.compile(r"^rs\d+$")
CHANGE_PATTERN = re.compile(r"(del|ins|dup|fs|[ACGT]>[ACGT])", re.IGNORECASE)

# RefSeq chromosome accessions whose number is not the chromosome name
CHROMOSOME_ALIASES = {"23": "X", "24": "Y", "12920": "MT"}


def recoder_alleles(records: list[Any]) -> list[dict[str, Any]]:
    """Flatten recoder output into per-allele records.

    Accepts both the allele-keyed shape (``[{"A": {"hgvsg": [...]}}]``) and
    the flat shape (``[{"hgvsg": [...]}]``).
    """
    alleles: list[dict[str, Any]] = []
    for record in records:
        if not isinstance(record, dict):
            continue
        if any(name in record for name in RECODER_FIELDS):
            alleles.append(record)
        else:
            alleles.extend(value for value in record.values() if isinstance(value, dict))
    return alleles


def _field_values(allele: dict[str, Any], name: str) -> list[str]:
    value = allele.get(name)
    if value is None:
        return []
    values = value if isinstance(value, list) else [value]
    values = [str(v) for v in values if v]
    if name == "id":
        values = [v for v in values if RSID_PATTERN.match(v)]
    return values


def preferred_notation(records: list[Any]) -> tuple[str, str] | None:
    """Pick the first present field among hgvsg, hgvsc, hgvsp, spdi, id.

    Returns:
        (field name, notation) or None when no allele carries any of them
    """
    alleles = recoder_alleles(records)
    for name in RECODER_FIELDS:
        for allele in alleles:
            values = _field_values(allele, name)
            if values:
                return name, values[0]
    return None


def parse_hgvsg(hgvsg: str) -> tuple[str, int, str]:
    """Split ``NC_000017.11:g.43124027_43124028del`` into ("17", 43124027, "_43124028del")."""
    match = HGVSG_PATTERN.match(hgvsg)
    if not match:
        raise NotFoundError(f"Unparseable genomic HGVS: {hgvsg}")
    number, position, change = match.groups()
    return CHROMOSOME_ALIASES.get(number, number), int(position), change


def select_mapping(mappings: list[dict[str, Any]], assembly: str) -> dict[str, Any] | None:
    for mapping in mappings:
        if isinstance(mapping, dict) and mapping.get("assembly_name") == assembly:
            return mapping
    return None


def numeric_rsid(notation: str) -> str | None:
    """``rs56116432`` or ``56116432`` as ``rs56116432``; None for anything else."""
    digits = notation[2:] if notation.lower().startswith("rs") else notation
    return f"rs{digits}" if digits.isdigit() else None


def _ordered(start: Any, end: Any) -> tuple[int, int]:
    # Ensembl reports insertions with start = end + 1
    a, b = int(start), int(end)
    return (a, b) if a <= b else (b, a)


class NotationResolver:
    """Turns a ParsedVariant into canonical genomic coordinates."""

    def __init__(
        self,
        ensembl: EnsemblClient,
        transcripts: TranscriptResolver,
        myvariant: MyVariantClient | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.ensembl = ensembl
        self.transcripts = transcripts
        self.myvariant = myvariant
        self.settings = settings or ensembl.settings
        self.assembly = self.settings.assembly

    async def resolve(self, parsed: ParsedVariant) -> GenomicCoordinates:
        """Resolve a classified variant.

        Raises:
            MalformedVariantError: Input was Unrecognized
            NotFoundError: rsID has no mapping on the target assembly
            StrategiesExhaustedError: Every fallback failed; reasons attached
        """
        if isinstance(parsed, RsId):
            return await self.resolve_rsid(parsed.id)
        if isinstance(parsed, (GenomicHgvs, CdnaHgvs)):
            return await self.resolve_hgvs(parsed.notation)
        if isinstance(parsed, GeneCdna):
            return await self.resolve_gene_cdna(parsed.gene, parsed.change)
        if isinstance(parsed, Unrecognized):
            raise MalformedVariantError(parsed.reason)
        raise MalformedVariantError(f"Unsupported variant type: {type(parsed).__name__}")

    async def resolve_rsid(self, rsid: str, provenance: str = RSID_DIRECT) -> GenomicCoordinates:
        """Coordinates for a variation id on the target assembly."""
        data = await self.ensembl.variation(rsid)
        mapping = select_mapping(data.get("mappings") or [], self.assembly)

        if mapping is None:
            raise NotFoundError(f"{rsid} has no {self.assembly} mapping")

        start, end = _ordered(mapping["start"], mapping["end"])
        return GenomicCoordinates(
            chromosome=str(mapping["seq_region_name"]),
            start=start,
            end=end,
            strand=Strand.from_ensembl(mapping.get("strand")),
            allele=mapping.get("allele_string") or data.get("allele_string"),
            assembly=mapping["assembly_name"],
            provenance=provenance,
            resolved_notation=data.get("name") or rsid,
        )

    async def resolve_hgvs(self, notation: str) -> GenomicCoordinates:
        """Resolve accession-qualified (or bare) notation through the HGVS fallback chain."""
        has_colon = ":" in notation
        is_numeric_rsid = numeric_rsid(notation) is not None
        gene_token = notation.split(":", 1)[0].strip()

        strategies = [
            Strategy(
                RSID_NUMERIC,
                partial(self._numeric_rsid, notation),
                applies=not has_colon,
                skip_reason="notation is accession-qualified",
            ),
            Strategy(
                VARIANT_RECODER,
                partial(self._via_recoder, notation),
                applies=has_colon,
                skip_reason="notation has no ':'",
            ),
            Strategy(
                VARIATION_LOOKUP,
                partial(self.resolve_rsid, notation, VARIATION_LOOKUP),
                applies=not has_colon and not is_numeric_rsid,
                skip_reason="notation is accession-qualified or already looked up as an rsID",
            ),
            Strategy(VEP_DIRECT, partial(self._via_vep, notation)),
            Strategy(
                "gene_fallback",
                partial(self.transcripts.gene_coordinates, gene_token),
                applies=has_colon and bool(gene_token),
                skip_reason="no gene token before ':'",
            ),
        ]
        return await run_chain(strategies, subject=notation)

    async def resolve_gene_cdna(self, gene: str, change: str) -> GenomicCoordinates:
        """Resolve a gene symbol + coding change, degrading to gene bounds."""
        strategies = [
            Strategy(
                "synonym_search",
                partial(self._via_synonym_search, gene, change),
                applies=self.myvariant is not None and bool(CHANGE_PATTERN.search(change)),
                skip_reason="change is not an indel/substitution pattern or search is disabled",
            ),
            Strategy("transcript_recoder", partial(self._via_transcripts, gene, change)),
            Strategy("gene_fallback", partial(self.transcripts.gene_coordinates, gene)),
        ]
        return await run_chain(strategies, subject=f"{gene} {change}")

    async def _numeric_rsid(self, notation: str) -> GenomicCoordinates:
        rsid = numeric_rsid(notation)
        if rsid is None:
            raise NotFoundError(f"{notation} is not a numeric rsID")
        return await self.resolve_rsid(rsid, RSID_NUMERIC)

    async def _via_recoder(self, notation: str) -> GenomicCoordinates:
        records = await self.ensembl.variant_recoder(notation)

        hgvsg = None
        for allele in recoder_alleles(records):
            values = _field_values(allele, "hgvsg")
            if values:
                hgvsg = values[0]
                break

        if hgvsg is None:
            raise NotFoundError(f"Variant recoder returned no genomic HGVS for {notation}")

        chromosome, position, change = parse_hgvsg(hgvsg)
        return GenomicCoordinates(
            chromosome=chromosome,
            start=position,
            end=position,
            allele=change or None,
            assembly=self.assembly,
            provenance=VARIANT_RECODER,
            resolved_notation=hgvsg,
        )

    async def _via_vep(self, notation: str) -> GenomicCoordinates:
        record = await self.ensembl.vep_hgvs(notation)
        start, end = _ordered(record["start"], record["end"])

        return GenomicCoordinates(
            chromosome=str(record["seq_region_name"]),
            start=start,
            end=end,
            strand=Strand.from_ensembl(record.get("strand")),
            allele=record.get("allele_string"),
            assembly=record.get("assembly_name") or self.assembly,
            provenance=VEP_DIRECT,
            resolved_notation=notation,
        )

    async def _via_synonym_search(self, gene: str, change: str) -> GenomicCoordinates:
        rsid = await self.myvariant.find_rsid_by_synonym(gene, change)
        if rsid is None:
            raise NotFoundError(f"No {gene} record lists {change} as a synonym")
        return await self.resolve_hgvs(rsid)

    async def _via_transcripts(self, gene: str, change: str) -> GenomicCoordinates:
        candidates = await self.transcripts.resolve_transcripts(gene)
        strategies = [
            Strategy(f"transcript {candidate.id}", partial(self._via_transcript, candidate, change))
            for candidate in candidates
        ]
        return await run_chain(strategies, subject=f"{gene} {change}")

    async def _via_transcript(self, candidate: TranscriptCandidate, change: str) -> GenomicCoordinates:
        notation = f"{candidate.id}:{change}"
        records = await self.ensembl.variant_recoder(notation)

        picked = preferred_notation(records)
        if picked is None:
            raise NotFoundError(f"Variant recoder returned no usable notation for {notation}")

        field_name, resolved = picked
        logger.info(f"{notation} recoded to {field_name} {resolved}")

        coordinates = await self.resolve_hgvs(resolved)
        return coordinates.model_copy(update={"transcript": candidate.id})
