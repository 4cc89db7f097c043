"""chart-lens: Turn arbitrary JSON API responses into chart-ready series."""

from chart_lens.core import generate_chart, sample_url
from chart_lens.normalization import NormalizationConfig, normalize, sample_series
from chart_lens.schema import NormalizedSeries, PieSlice

__version__ = "0.1.0"

__all__ = [
    "generate_chart",
    "normalize",
    "sample_series",
    "sample_url",
    "NormalizationConfig",
    "NormalizedSeries",
    "PieSlice",
    "__version__",
]
