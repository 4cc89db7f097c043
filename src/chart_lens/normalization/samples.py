"""Built-in sample series used when a payload cannot be charted."""

from chart_lens.normalization.types import LEGEND_FONT_COLOR, LEGEND_FONT_SIZE, PALETTE
from chart_lens.schema import Mode, NormalizedSeries, PieSlice

BAR_SAMPLE = (
    ("Jan", 65),
    ("Feb", 59),
    ("Mar", 80),
    ("Apr", 81),
    ("May", 56),
)

PIE_SAMPLE = (
    ("A", 35),
    ("B", 28),
    ("C", 22),
    ("D", 15),
)

SAMPLE_URLS: dict[str, str] = {
    "bar": "https://disease.sh/v3/covid-19/countries?sort=cases",
    "pie": "https://api.github.com/repos/facebook/react/languages",
}


def bar_sample() -> NormalizedSeries:
    return NormalizedSeries(
        mode="bar",
        labels=[label for label, _ in BAR_SAMPLE],
        values=[value for _, value in BAR_SAMPLE],
        magnitude_suffix="none",
        source="sample",
    )


def pie_sample() -> NormalizedSeries:
    slices = [
        PieSlice(
            label=label,
            value=value,
            color_index=idx,
            color=PALETTE[idx],
            legend_font_color=LEGEND_FONT_COLOR,
            legend_font_size=LEGEND_FONT_SIZE,
        )
        for idx, (label, value) in enumerate(PIE_SAMPLE)
    ]
    return NormalizedSeries(
        mode="pie",
        labels=[item.label for item in slices],
        slices=slices,
        source="sample",
    )


def sample_series(mode: Mode) -> NormalizedSeries:
    """Return a fresh copy of the built-in sample for ``mode``."""
    if mode == "pie":
        return pie_sample()
    return bar_sample()
