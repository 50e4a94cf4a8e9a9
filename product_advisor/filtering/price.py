from __future__ import annotations

import re

from .models import PriceConstraint

_CURRENCY = r"(?:rs\.?\s*|₹\s*)?"
_AMOUNT = r"(\d+(?:,\d+)*)"

# Tried in order; the first pattern that matches decides the ceiling.
PRICE_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    ("under", re.compile(r"under\s+" + _CURRENCY + _AMOUNT, re.IGNORECASE)),
    ("below", re.compile(r"below\s+" + _CURRENCY + _AMOUNT, re.IGNORECASE)),
    ("less than", re.compile(r"less\s+than\s+" + _CURRENCY + _AMOUNT, re.IGNORECASE)),
    ("within", re.compile(r"within\s+" + _CURRENCY + _AMOUNT, re.IGNORECASE)),
    ("budget", re.compile(r"budget.*?" + _CURRENCY + _AMOUNT, re.IGNORECASE)),
]


def extract_price_constraint(query: str) -> PriceConstraint:
    """Return the upper price bound mentioned in *query*, if any."""
    for _name, pattern in PRICE_PATTERNS:
        match = pattern.search(query)
        if match:
            return PriceConstraint(max=int(match.group(1).replace(",", "")))
    return PriceConstraint()
