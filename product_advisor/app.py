from __future__ import annotations

import logging
import os

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from .catalog.data_store import get_catalog, get_categories
from .filtering.config import DEFAULT_FILTER_CONFIG
from .filtering.models import FilterResult
from .filtering.pipeline import filter_products, get_filter_stats
from .recommendations.advisor import get_advisory
from .recommendations.models import (
    AdvisoryRequest,
    AdvisoryResponse,
    SortRequest,
    SortResponse,
)
from .recommendations.sorting import get_sort_description, sort_recommendations

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

app = FastAPI(title="Product Advisor API", version="1.0.0")


class FilterRequest(BaseModel):
    query: str = Field(..., min_length=1, max_length=1000)


class FilterResponse(BaseModel):
    result: FilterResult
    stats: str


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    catalog = get_catalog()
    return {
        "total_products": len(catalog),
        "categories": get_categories(catalog),
        "smart_filter_enabled": DEFAULT_FILTER_CONFIG.enabled,
    }


# ── Advisory endpoints ───────────────────────────────────────────────────


@app.post("/filter", response_model=FilterResponse)
def filter_catalog(body: FilterRequest) -> FilterResponse:
    result = filter_products(body.query, get_catalog())
    return FilterResponse(result=result, stats=get_filter_stats(result))


@app.post("/recommendations", response_model=AdvisoryResponse)
def recommendations(body: AdvisoryRequest) -> AdvisoryResponse:
    try:
        return get_advisory(body)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@app.post("/recommendations/sort", response_model=SortResponse)
def resort_recommendations(body: SortRequest) -> SortResponse:
    return SortResponse(
        recommendations=sort_recommendations(body.recommendations, body.sort_option),
        sort_option=body.sort_option,
        sort_description=get_sort_description(body.sort_option),
    )
