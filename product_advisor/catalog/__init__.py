"""
Product catalog package.

Responsibilities:
- Define the canonical CatalogItem schema.
- Load the static product catalog shipped with the service.
- Keep a single read-only in-memory copy for the filtering pipeline.
"""
