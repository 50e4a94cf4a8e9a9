from __future__ import annotations

import logging
from typing import List

import pandas as pd

from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .models import CatalogItem

logger = logging.getLogger(__name__)

CATALOG_COLUMNS: List[str] = [
    "brand",
    "product_name",
    "price",
    "category",
    "description",
]

_catalog: list[CatalogItem] | None = None


def _load_frame(config: CatalogConfig) -> pd.DataFrame:
    text_columns = ["brand", "product_name", "category", "description"]

    # No dtype inference: number-like text stays text, price is coerced below
    df = pd.read_json(config.catalog_path, orient="records", dtype=False)

    for col in CATALOG_COLUMNS:
        if col not in df.columns:
            df[col] = pd.NA

    df[text_columns] = df[text_columns].fillna("").astype(str)

    # Rows without a usable price cannot take part in price filtering
    df["price"] = pd.to_numeric(df["price"], errors="coerce")
    valid = df["price"].notna() & (df["price"] >= 0)
    dropped = int((~valid).sum())
    if dropped:
        logger.warning("Dropped %d catalog rows with missing or negative price", dropped)

    return df.loc[valid, CATALOG_COLUMNS]


def load_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> list[CatalogItem]:
    """Read the catalog file into a list of CatalogItem, preserving file order."""
    df = _load_frame(config)
    items = [CatalogItem(**record) for record in df.to_dict(orient="records")]
    logger.info("Loaded %d products from %s", len(items), config.catalog_path)
    return items


def get_catalog() -> list[CatalogItem]:
    """Return the in-memory catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog()
    return _catalog


def get_categories(items: list[CatalogItem] | None = None) -> list[str]:
    products = items if items is not None else get_catalog()
    return sorted({p.category for p in products if p.category})
