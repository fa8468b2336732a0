"""Annotation aggregation over UCSC tracks."""

from variantexplorer.annotate.aggregator import AnnotationAggregator, clamp_region, normalize_chromosome

__all__ = ["AnnotationAggregator", "clamp_region", "normalize_chromosome"]
