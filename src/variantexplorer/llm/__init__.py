"""LLM helpers for free-text variant queries."""

from variantexplorer.llm.extractor import HGVSExtractor

__all__ = ["HGVSExtractor"]
