"""Notation resolution: fallback chain, transcript ranking and the resolver."""

from variantexplorer.resolve.chain import Strategy, run_chain
from variantexplorer.resolve.resolver import NotationResolver
from variantexplorer.resolve.transcripts import TranscriptResolver

__all__ = ["Strategy", "run_chain", "NotationResolver", "TranscriptResolver"]
