"""Field profile repository for record extraction."""

from __future__ import annotations

from dataclasses import dataclass
from importlib import import_module

from chart_lens.schema import Mode


@dataclass(frozen=True)
class FieldProfile:
    mode: Mode
    label_fields: tuple[str, ...]
    value_fields: tuple[str, ...]
    item_label: str

    def synthetic_label(self, position: int) -> str:
        return self.item_label.format(n=position)


class FieldRepository:
    """Loads candidate label/value field lists from packaged profiles."""

    def __init__(self, profile: str = "default"):
        self.profile = profile
        module = self._load_module()
        self.label_fields: dict[str, list[str]] = module.LABEL_FIELDS
        self.value_fields: dict[str, list[str]] = module.VALUE_FIELDS
        self.item_labels: dict[str, str] = module.ITEM_LABELS

    def for_mode(
        self,
        mode: Mode,
        *,
        label_fields: tuple[str, ...] | None = None,
        value_fields: tuple[str, ...] | None = None,
    ) -> FieldProfile:
        return FieldProfile(
            mode=mode,
            label_fields=tuple(label_fields or self.label_fields[mode]),
            value_fields=tuple(value_fields or self.value_fields[mode]),
            item_label=self.item_labels[mode],
        )

    def _load_module(self):
        try:
            return import_module(f"chart_lens.normalization.data.{self.profile}.fields")
        except ModuleNotFoundError as exc:
            raise ValueError(f"Unknown field profile: {self.profile}") from exc
