from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from ..catalog.models import CatalogItem
from ..filtering.models import FilterResult


class SortOption(str, Enum):
    match_score = "match_score"
    price_low_to_high = "price_low_to_high"
    price_high_to_low = "price_high_to_low"


class Recommendation(BaseModel):
    product: CatalogItem
    match_score: float = Field(..., description="LLM fit score, 1 (poor) to 10 (ideal)")
    explanation: str = ""


class AIResponse(BaseModel):
    recommendations: list[Recommendation] = Field(default_factory=list)
    summary: str = ""
    error: bool = False


class AdvisoryRequest(BaseModel):
    query: str = Field(..., min_length=1, max_length=1000, description="Free-text description of the user's need")
    sort_option: SortOption = SortOption.match_score


class AdvisoryResponse(BaseModel):
    recommendations: list[Recommendation]
    summary: str
    error: bool = False
    sort_option: SortOption
    sort_description: str
    filter: FilterResult | None = None


class SortRequest(BaseModel):
    recommendations: list[Recommendation]
    sort_option: SortOption = SortOption.match_score


class SortResponse(BaseModel):
    recommendations: list[Recommendation]
    sort_option: SortOption
    sort_description: str
