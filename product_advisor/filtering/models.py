from __future__ import annotations

from pydantic import BaseModel, Field

from ..catalog.models import CatalogItem


class PriceConstraint(BaseModel):
    max: int | None = None


class FilterResult(BaseModel):
    filtered_products: list[CatalogItem] = Field(default_factory=list)
    filter_reason: str = ""
    original_count: int = Field(default=0, ge=0)
    filtered_count: int = Field(default=0, ge=0)
