"""Normalization of arbitrary JSON payloads into chart series."""

from chart_lens.normalization.engine import NormalizationConfig, NormalizationEngine, normalize
from chart_lens.normalization.repository import FieldProfile, FieldRepository
from chart_lens.normalization.samples import SAMPLE_URLS, sample_series
from chart_lens.normalization.types import PALETTE, ExtractedEntry, resolve_mode

__all__ = [
    "ExtractedEntry",
    "FieldProfile",
    "FieldRepository",
    "NormalizationConfig",
    "NormalizationEngine",
    "PALETTE",
    "SAMPLE_URLS",
    "normalize",
    "resolve_mode",
    "sample_series",
]
