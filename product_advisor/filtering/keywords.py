from __future__ import annotations

import logging
from typing import Sequence

from ..catalog.models import CatalogItem
from .config import DEFAULT_FILTER_CONFIG, FilterConfig

logger = logging.getLogger(__name__)

NAME_WEIGHT = 3
TEXT_WEIGHT = 1
LONG_TOKEN_BONUS = 1
_MIN_TOKEN_LEN = 2  # tokens must be longer than this
_LONG_TOKEN_LEN = 4


def tokenize(query: str, min_length: int = _MIN_TOKEN_LEN) -> list[str]:
    """Split on single spaces and keep words longer than *min_length*."""
    return [word for word in query.split(" ") if len(word) > min_length]


def _match_score(item: CatalogItem, words: list[str]) -> int:
    """Score used to decide whether an item matches at all (brand included)."""
    name = item.product_name.lower()
    text = f"{item.product_name} {item.description} {item.brand}".lower()

    score = 0
    for word in words:
        if word in text:
            score += NAME_WEIGHT if word in name else TEXT_WEIGHT
            if len(word) > _LONG_TOKEN_LEN:
                score += LONG_TOKEN_BONUS
    return score


def _relevance_score(item: CatalogItem, words: list[str]) -> int:
    """Ordering score over name and description only."""
    name = item.product_name.lower()
    text = f"{item.product_name} {item.description}".lower()

    score = 0
    for word in words:
        if word in name:
            score += NAME_WEIGHT
        if word in text:
            score += TEXT_WEIGHT
    return score


def find_keyword_matches(query: str, products: Sequence[CatalogItem]) -> list[CatalogItem]:
    """
    Return products whose name, description or brand contains a query word,
    most relevant first.

    An empty list means there was no direct match. Ties keep input order.
    """
    words = tokenize(query)
    logger.debug("Query words: %s", words)

    matches: list[CatalogItem] = []
    for product in products:
        score = _match_score(product, words)
        if score > 0:
            logger.debug("Match found: %r (score: %d)", product.product_name, score)
            matches.append(product)

    matches.sort(key=lambda p: _relevance_score(p, words), reverse=True)

    logger.debug("Found %d direct keyword matches", len(matches))
    return matches


def broaden_search(
    query: str,
    products: Sequence[CatalogItem],
    config: FilterConfig = DEFAULT_FILTER_CONFIG,
) -> list[CatalogItem]:
    """
    Lenient fallback: keep products whose name or description contains the
    first ``config.prefix_length`` characters of any query word at least that
    long, in catalog order, at most ``config.broadened_limit`` of them.
    """
    length = config.prefix_length
    prefixes = [word[:length] for word in tokenize(query, min_length=length - 1)]

    broadened: list[CatalogItem] = []
    for product in products:
        text = f"{product.product_name} {product.description}".lower()
        if any(prefix in text for prefix in prefixes):
            broadened.append(product)
    return broadened[: config.broadened_limit]
