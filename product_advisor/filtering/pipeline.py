"""
Filter pipeline: reduces the full catalog to a handful of candidates.

Steps, each replacing the working set when it fires:
- price ceiling from the query text
- direct keyword matching (ranked by relevance)
- category inference, only when no keyword matched
- broadened prefix search over the full catalog when fewer than
  ``min_results`` candidates remain
- truncation to ``max_results``
"""
from __future__ import annotations

import logging
from typing import Sequence

from ..catalog.models import CatalogItem
from .categories import find_relevant_categories
from .config import DEFAULT_FILTER_CONFIG, FilterConfig
from .keywords import broaden_search, find_keyword_matches
from .models import FilterResult
from .price import extract_price_constraint

logger = logging.getLogger(__name__)

STEP_SEPARATOR = " → "
KEYWORD_STEP = "Direct keyword matching"
BROADENED_STEP = "Broadened search for more results"


def filter_products(
    user_query: str,
    all_products: Sequence[CatalogItem],
    config: FilterConfig = DEFAULT_FILTER_CONFIG,
) -> FilterResult:
    query = user_query.lower()
    products = list(all_products)
    steps: list[str] = []

    logger.debug("Starting filter for query: %r", user_query)

    # --- Price ceiling ---
    price = extract_price_constraint(query)
    if price.max is not None:
        products = [p for p in products if p.price <= price.max]
        steps.append(f"Price filter: ≤₹{price.max}")
        logger.debug("After price filter: %d products", len(products))

    # --- Keywords, falling back to categories ---
    direct_matches = find_keyword_matches(query, products)
    if direct_matches:
        products = direct_matches
        steps.append(KEYWORD_STEP)
        logger.debug("After direct keyword matching: %d products", len(products))
    else:
        categories = find_relevant_categories(query)
        if categories:
            in_category = [p for p in products if p.category in categories]
            if in_category:
                products = in_category
                steps.append(f"Categories: {', '.join(categories)}")
                logger.debug("After category filter: %d products", len(products))

    # --- Too few left: reset to a lenient search over everything ---
    if len(products) < config.min_results:
        products = broaden_search(query, all_products, config)
        steps.append(BROADENED_STEP)
        logger.debug("After broadened search: %d products", len(products))

    if len(products) > config.max_results:
        products = products[: config.max_results]
        steps.append(f"Limited to top {config.max_results} products")
        logger.debug("Limited to top %d products", config.max_results)

    logger.debug("Final filtered products: %s", [p.product_name for p in products])

    return FilterResult(
        filtered_products=products,
        filter_reason=STEP_SEPARATOR.join(steps),
        original_count=len(all_products),
        filtered_count=len(products),
    )


def get_filter_stats(result: FilterResult) -> str:
    """One-line summary of how much the catalog was narrowed."""
    if result.original_count:
        removed = result.original_count - result.filtered_count
        reduction = round(removed / result.original_count * 100)
    else:
        reduction = 0
    return (
        f"Filtered {result.original_count} → {result.filtered_count} products "
        f"({reduction}% reduction)"
    )
