from __future__ import annotations

import logging
import time
from typing import Sequence

from ..catalog.data_store import get_catalog
from ..catalog.models import CatalogItem
from ..filtering.config import DEFAULT_FILTER_CONFIG, FilterConfig
from ..filtering.models import FilterResult
from ..filtering.pipeline import filter_products, get_filter_stats
from ..llm.config import DEFAULT_LLM_CONFIG, LLMConfig
from ..llm.groq_client import get_ai_recommendations
from .models import AdvisoryRequest, AdvisoryResponse
from .sorting import get_sort_description, sort_recommendations

logger = logging.getLogger(__name__)


def select_candidates(
    query: str,
    catalog: Sequence[CatalogItem],
    config: FilterConfig = DEFAULT_FILTER_CONFIG,
) -> tuple[list[CatalogItem], FilterResult | None]:
    """Return the products to send to the LLM and the filter result, if filtering ran."""
    if not config.enabled:
        logger.info("Smart filter disabled, sending all %d products to AI", len(catalog))
        return list(catalog), None

    result = filter_products(query, catalog, config)
    logger.info("Smart filter enabled: %s", get_filter_stats(result))
    logger.info("Filter logic: %s", result.filter_reason)
    return result.filtered_products, result


def get_advisory(
    request: AdvisoryRequest,
    catalog: Sequence[CatalogItem] | None = None,
    filter_config: FilterConfig = DEFAULT_FILTER_CONFIG,
    llm_config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> AdvisoryResponse:
    if not request.query.strip():
        raise ValueError("Please enter your product needs")

    start_time = time.time()
    products = catalog if catalog is not None else get_catalog()

    candidates, filter_result = select_candidates(request.query, products, filter_config)
    ai_response = get_ai_recommendations(request.query, candidates, filter_result, llm_config)

    if ai_response.error:
        logger.warning("AI ranking failed: %s", ai_response.summary)

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    logger.info(
        "Advisory for %r: %d candidates, %d recommendations in %.1f ms",
        request.query,
        len(candidates),
        len(ai_response.recommendations),
        elapsed_ms,
    )

    return AdvisoryResponse(
        recommendations=sort_recommendations(ai_response.recommendations, request.sort_option),
        summary=ai_response.summary,
        error=ai_response.error,
        sort_option=request.sort_option,
        sort_description=get_sort_description(request.sort_option),
        filter=filter_result,
    )
