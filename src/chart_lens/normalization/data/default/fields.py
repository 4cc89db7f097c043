"""Candidate field names shared by bar and pie charts."""

_LABELS = [
    "name",
    "country",
    "title",
    "category",
    "month",
    "date",
    "label",
    "symbol",
    "id",
]

_VALUES = [
    "cases",
    "population",
    "market_cap",
    "current_price",
    "value",
    "price",
    "sales",
    "count",
    "total",
    "amount",
    "score",
]

LABEL_FIELDS = {"bar": _LABELS, "pie": _LABELS}
VALUE_FIELDS = {"bar": _VALUES, "pie": _VALUES}
ITEM_LABELS = {"bar": "Item{n}", "pie": "Item{n}"}
