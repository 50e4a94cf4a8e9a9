from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CatalogItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    brand: str
    product_name: str
    price: float = Field(..., ge=0)
    category: str
    description: str = ""
