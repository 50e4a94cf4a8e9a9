from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class FilterConfig:
    # When disabled the whole catalog is forwarded to the LLM unfiltered
    enabled: bool = _env_flag("SMART_FILTER_ENABLED", True)
    max_results: int = 10
    min_results: int = 3
    broadened_limit: int = 8
    prefix_length: int = 4


DEFAULT_FILTER_CONFIG = FilterConfig()
