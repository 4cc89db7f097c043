"""Field profile: default."""

from chart_lens.normalization.data.default.fields import ITEM_LABELS, LABEL_FIELDS, VALUE_FIELDS

__all__ = ["LABEL_FIELDS", "VALUE_FIELDS", "ITEM_LABELS"]
