"""Field profile: legacy."""

from chart_lens.normalization.data.legacy.fields import ITEM_LABELS, LABEL_FIELDS, VALUE_FIELDS

__all__ = ["LABEL_FIELDS", "VALUE_FIELDS", "ITEM_LABELS"]
