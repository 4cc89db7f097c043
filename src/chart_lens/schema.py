"""Data models for chart-lens."""

from typing import Literal

from pydantic import BaseModel, Field

Mode = Literal["bar", "pie"]
MagnitudeSuffix = Literal["none", "thousand", "million", "billion"]
Source = Literal["data", "sample"]

_MAGNITUDE_WORDS = {
    "thousand": "Thousands",
    "million": "Millions",
    "billion": "Billions",
}


class PieSlice(BaseModel):
    """One weighted slice of a pie series."""

    label: str
    value: float = Field(ge=0.0)
    color_index: int = Field(ge=0)
    color: str
    legend_font_color: str = "#fff"
    legend_font_size: int = 14


class NormalizedSeries(BaseModel):
    """Render-ready chart series.

    Bar series carry ``values`` (scaled by ``magnitude_suffix``); pie series
    carry ``slices`` with raw weights.
    """

    mode: Mode
    labels: list[str] = Field(default_factory=list)
    values: list[float] = Field(default_factory=list)
    slices: list[PieSlice] = Field(default_factory=list)
    magnitude_suffix: MagnitudeSuffix = "none"
    source: Source = "data"

    @property
    def magnitude_note(self) -> str | None:
        return magnitude_note(self.magnitude_suffix)


def magnitude_note(suffix: MagnitudeSuffix) -> str | None:
    """Human-readable note for a magnitude suffix, or None when unscaled."""
    word = _MAGNITUDE_WORDS.get(suffix)
    if word is None:
        return None
    return f"Values shown in {word}"
