"""Core chart generation function."""

from chart_lens.fetch import FetchConfig, fetch_json
from chart_lens.normalization import NormalizationConfig, NormalizationEngine, resolve_mode
from chart_lens.normalization.samples import SAMPLE_URLS
from chart_lens.schema import NormalizedSeries


def sample_url(mode: str = "bar") -> str:
    """Return a public JSON URL that charts well in ``mode``."""
    return SAMPLE_URLS[resolve_mode(mode)]


def generate_chart(
    url: str,
    mode: str = "bar",
    *,
    config: NormalizationConfig | None = None,
    fetch_config: FetchConfig | None = None,
) -> NormalizedSeries:
    """Fetch JSON from a URL and normalize it into a chart series.

    Args:
        url: http(s) URL returning a JSON document.
        mode: ``bar``/``categorical`` or ``pie``/``proportional``.
        config: Normalization settings. Defaults to ``NormalizationConfig()``.
        fetch_config: HTTP settings. Defaults to ``FetchConfig.from_env()``.

    Returns:
        NormalizedSeries for the fetched payload. Payloads that cannot be
        charted yield the built-in sample for ``mode``.

    Raises:
        ValueError: If ``mode`` is unknown.
        ChartLensError: If the URL is invalid or the fetch or decode fails.
    """
    resolved = resolve_mode(mode)
    engine = NormalizationEngine(config=config)
    payload = fetch_json(url, config=fetch_config or FetchConfig.from_env())
    return engine.normalize(payload, resolved)
