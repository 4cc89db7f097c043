"""Candidate field names as the first mobile chart screen read them.

Pie charts used a shorter list with ``key`` and no date-like or price-like
fields, and spaced synthetic labels.
"""

LABEL_FIELDS = {
    "bar": [
        "name",
        "country",
        "title",
        "category",
        "month",
        "date",
        "label",
        "symbol",
        "id",
    ],
    "pie": [
        "name",
        "country",
        "title",
        "category",
        "label",
        "key",
        "symbol",
    ],
}

VALUE_FIELDS = {
    "bar": [
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
    ],
    "pie": [
        "cases",
        "population",
        "value",
        "count",
        "total",
        "amount",
        "score",
        "current_price",
    ],
}

ITEM_LABELS = {"bar": "Item{n}", "pie": "Item {n}"}
