"""Runtime settings for variant resolution and annotation.

Settings come from three layers, later layers winning:
- ``defaults.yaml`` shipped next to this module
- an optional user YAML file
- ``VARIANTEXPLORER_*`` environment variables (a ``.env`` file is honoured)

The resulting ``Settings`` object is passed explicitly to the clients,
resolver, aggregator and engine.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "VARIANTEXPLORER_"


class Settings(BaseModel):
    """Service endpoints, retry knobs and annotation track names."""

    ensembl_base_url: str = Field(default="https://rest.ensembl.org", description="Ensembl REST root")
    ucsc_api_url: str = Field(default="https://api.genome.ucsc.edu", description="UCSC REST API root")
    ucsc_browser_url: str = Field(
        default="https://genome.ucsc.edu/cgi-bin/hgTracks", description="UCSC browser page for deep links"
    )
    myvariant_base_url: str = Field(default="https://myvariant.info/v1", description="MyVariant.info root")

    species: str = Field(default="homo_sapiens", description="Species for gene symbol lookups")
    assembly: str = Field(default="GRCh38", description="Target assembly for coordinate mappings")
    ucsc_genome: str = Field(default="hg38", description="UCSC database name for the target assembly")

    timeout: float = Field(default=30.0, gt=0, description="Per-request timeout in seconds")
    max_attempts: int = Field(
        default=2, ge=0, description="Retries after the first try (attempts are numbered 0..max_attempts)"
    )
    max_region_span: int = Field(default=1_000_000, gt=0, description="Largest window sent to UCSC")
    max_transcript_candidates: int = Field(default=3, ge=1, description="Transcripts tried per gene")

    tracks: dict[str, str] = Field(
        default_factory=lambda: {
            "gene_model": "knownGene",
            "conservation": "phastCons100way",
            "known_variants": "snp151Common",
            "clinical_significance": "clinvarMain",
        },
        description="Annotation layer -> UCSC track name",
    )

    enable_llm_extraction: bool = Field(
        default=False, description="Ask an LLM for HGVS notation when input is unrecognized"
    )
    llm_model: str = Field(default="gpt-4o-mini", description="litellm model name for extraction")
    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator("ensembl_base_url", "ucsc_api_url", "myvariant_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


@lru_cache(maxsize=1)
def load_defaults() -> dict[str, Any]:
    """Load the packaged defaults.yaml."""
    config_path = Path(__file__).parent / "defaults.yaml"

    if not config_path.exists():
        return {}

    with open(config_path) as f:
        config = yaml.safe_load(f)

    return config or {}


def _env_overrides() -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for name in Settings.model_fields:
        if name == "tracks":
            continue
        value = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
        if value is not None:
            overrides[name] = value
    return overrides


def load_settings(config_path: Path | str | None = None, **overrides: Any) -> Settings:
    """Build settings from defaults, an optional YAML file, the environment and kwargs.

    Args:
        config_path: Optional YAML file overlaying the packaged defaults
        **overrides: Explicit values that win over every other source

    Returns:
        Validated Settings instance
    """
    load_dotenv()

    data = dict(load_defaults())
    data["tracks"] = dict(data.get("tracks") or {})

    if config_path is not None:
        with open(config_path) as f:
            user_config = yaml.safe_load(f) or {}
        tracks = user_config.pop("tracks", None)
        data.update(user_config)
        if tracks:
            data["tracks"].update(tracks)

    data.update(_env_overrides())
    data.update(overrides)

    if not data["tracks"]:
        data.pop("tracks")

    return Settings(**data)
