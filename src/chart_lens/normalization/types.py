"""Shared types and constants for chart normalization."""

from dataclasses import dataclass
from typing import Literal

from chart_lens.schema import Mode

Shape = Literal["array", "map"]

PALETTE = ("#6366f1", "#ef4444", "#f59e0b", "#10b981", "#8b5cf6", "#ec4899")
LEGEND_FONT_COLOR = "#fff"
LEGEND_FONT_SIZE = 14

MODE_ALIASES: dict[str, Mode] = {
    "bar": "bar",
    "categorical": "bar",
    "pie": "pie",
    "proportional": "pie",
}


@dataclass(frozen=True)
class ExtractedEntry:
    label: str
    raw_value: float


def resolve_mode(mode: str) -> Mode:
    """Map a mode name or alias (``categorical``/``proportional``) to ``bar``/``pie``."""
    key = (mode or "").strip().lower()
    if key not in MODE_ALIASES:
        raise ValueError(f"Unsupported chart mode: {mode}")
    return MODE_ALIASES[key]
