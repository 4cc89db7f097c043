"""Normalization engine turning arbitrary JSON into chart series."""

from __future__ import annotations

import logging
import math
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from itertools import islice
from typing import Any

from chart_lens.exceptions import RecordExtractionError
from chart_lens.normalization.repository import FieldProfile, FieldRepository
from chart_lens.normalization.samples import sample_series
from chart_lens.normalization.types import (
    LEGEND_FONT_COLOR,
    LEGEND_FONT_SIZE,
    PALETTE,
    ExtractedEntry,
    Shape,
    resolve_mode,
)
from chart_lens.schema import MagnitudeSuffix, Mode, NormalizedSeries, PieSlice

logger = logging.getLogger(__name__)

# Largest first; the billion rung applies to map payloads only with uniform_magnitude.
MAGNITUDES: tuple[tuple[float, MagnitudeSuffix], ...] = (
    (1_000_000_000, "billion"),
    (1_000_000, "million"),
    (1_000, "thousand"),
)

_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def _parse_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _safe_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class NormalizationConfig:
    field_profile: str = "default"
    max_entries: int = 6
    bar_label_length: int = 5
    pie_label_length: int = 9
    uniform_magnitude: bool = False
    label_fields: tuple[str, ...] | None = None
    value_fields: tuple[str, ...] | None = None

    @classmethod
    def from_env(cls) -> "NormalizationConfig":
        field_profile = os.getenv("CHART_LENS_FIELD_PROFILE", "default").strip().lower() or "default"
        try:
            FieldRepository(profile=field_profile)
        except ValueError:
            logger.warning("unknown field profile %r, using default", field_profile)
            field_profile = "default"
        return cls(
            field_profile=field_profile,
            max_entries=max(1, _safe_int(os.getenv("CHART_LENS_MAX_ENTRIES"), 6)),
            uniform_magnitude=_parse_bool(os.getenv("CHART_LENS_UNIFORM_MAGNITUDE"), False),
        )


class NormalizationEngine:
    """Heuristic JSON-to-series engine.

    Never raises for payload content: unsupported shapes and unreadable
    records fall back to the built-in sample for the requested mode.
    """

    def __init__(self, config: NormalizationConfig | None = None):
        self.config = config or NormalizationConfig()
        self.repo = FieldRepository(profile=self.config.field_profile)
        self._profiles: dict[Mode, FieldProfile] = {
            mode: self.repo.for_mode(
                mode,
                label_fields=self.config.label_fields,
                value_fields=self.config.value_fields,
            )
            for mode in ("bar", "pie")
        }

    def normalize(self, raw: Any, mode: str = "bar") -> NormalizedSeries:
        resolved = resolve_mode(mode)
        shape = detect_shape(raw)
        if shape is None:
            logger.info("unsupported payload type %s, using %s sample", type(raw).__name__, resolved)
            return sample_series(resolved)

        try:
            entries = self.extract(raw, resolved)
        except RecordExtractionError as exc:
            logger.warning("%s chart extraction failed (%s), using sample", resolved, exc)
            return sample_series(resolved)

        if resolved == "bar":
            return self._build_bar(entries, shape)
        return self._build_pie(entries)

    def extract(self, raw: Any, mode: Mode) -> list[ExtractedEntry]:
        """Project an array or map payload onto at most ``max_entries`` entries.

        Raises:
            RecordExtractionError: If a record's fields cannot be read.
            ValueError: If ``raw`` is neither a list nor a dict.
        """
        shape = detect_shape(raw)
        if shape == "array":
            return self._extract_records(raw, mode)
        if shape == "map":
            return self._extract_items(raw, mode)
        raise ValueError(f"Unsupported payload type: {type(raw).__name__}")

    def _extract_records(self, records: list, mode: Mode) -> list[ExtractedEntry]:
        profile = self._profiles[mode]
        limit = self._label_length(mode)
        entries: list[ExtractedEntry] = []
        for idx, record in enumerate(records[: self.config.max_entries]):
            label = _first_label(record, idx, profile.label_fields)
            if label is None:
                label = profile.synthetic_label(idx + 1)
            value = _first_number(record, idx, profile.value_fields)
            entries.append(ExtractedEntry(label=label[:limit], raw_value=abs(value)))
        return entries

    def _extract_items(self, data: Mapping, mode: Mode) -> list[ExtractedEntry]:
        limit = self._label_length(mode)
        entries: list[ExtractedEntry] = []
        for key, value in islice(data.items(), self.config.max_entries):
            number = _to_number(value)
            entries.append(
                ExtractedEntry(
                    label=_label_text(key)[:limit],
                    raw_value=abs(number) if number is not None else 0.0,
                )
            )
        return entries

    def _build_bar(self, entries: list[ExtractedEntry], shape: Shape) -> NormalizedSeries:
        suffix, values = self._scale([entry.raw_value for entry in entries], shape)
        return NormalizedSeries(
            mode="bar",
            labels=[entry.label for entry in entries],
            values=values or [1],
            magnitude_suffix=suffix,
        )

    def _build_pie(self, entries: list[ExtractedEntry]) -> NormalizedSeries:
        slices = [
            PieSlice(
                label=entry.label,
                value=entry.raw_value,
                color_index=idx % len(PALETTE),
                color=PALETTE[idx % len(PALETTE)],
                legend_font_color=LEGEND_FONT_COLOR,
                legend_font_size=LEGEND_FONT_SIZE,
            )
            for idx, entry in enumerate(entries)
        ]
        return NormalizedSeries(
            mode="pie",
            labels=[item.label for item in slices],
            slices=slices,
        )

    def _scale(self, values: list[float], shape: Shape) -> tuple[MagnitudeSuffix, list[float]]:
        if not values:
            return "none", []

        peak = max(values)
        for divisor, suffix in MAGNITUDES:
            if suffix == "billion" and shape == "map" and not self.config.uniform_magnitude:
                continue
            if peak > divisor:
                return suffix, [_round_half_up(value / divisor) for value in values]
        return "none", list(values)

    def _label_length(self, mode: Mode) -> int:
        if mode == "pie":
            return self.config.pie_label_length
        return self.config.bar_label_length


def normalize(
    raw: Any,
    mode: str = "bar",
    *,
    config: NormalizationConfig | None = None,
) -> NormalizedSeries:
    """Normalize a decoded JSON payload into a bar or pie series.

    Args:
        raw: Decoded JSON value of unknown shape (list, dict, or anything else).
        mode: ``bar``/``categorical`` or ``pie``/``proportional``.
        config: Engine configuration. Defaults to ``NormalizationConfig()``.

    Returns:
        NormalizedSeries. The built-in sample for ``mode`` when ``raw`` cannot
        be charted.

    Raises:
        ValueError: If ``mode`` is not a known chart mode.
    """
    return NormalizationEngine(config=config).normalize(raw, mode)


def detect_shape(raw: Any) -> Shape | None:
    if isinstance(raw, list):
        return "array"
    if isinstance(raw, Mapping):
        return "map"
    return None


def _field(record: Any, idx: int, name: str) -> Any:
    if record is None:
        raise RecordExtractionError(idx, f"cannot read '{name}' of null")
    if isinstance(record, Mapping):
        return record.get(name)
    # Scalars and nested arrays have no named fields.
    return None


def _first_label(record: Any, idx: int, fields: tuple[str, ...]) -> str | None:
    for name in fields:
        value = _field(record, idx, name)
        if _is_blank(value) or isinstance(value, (Mapping, list)):
            continue
        text = _label_text(value)
        if text.strip():
            return text
    return None


def _first_number(record: Any, idx: int, fields: tuple[str, ...]) -> float:
    for name in fields:
        number = _to_number(_field(record, idx, name))
        # Zero falls through to the next candidate; it is only the final default.
        if number:
            return number
    return 0.0


def _is_blank(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    return False


def _to_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        match = _LEADING_NUMBER.match(value.strip())
        if not match:
            return None
        number = float(match.group())
    else:
        return None
    return number if math.isfinite(number) else None


def _label_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))
