from __future__ import annotations

import json
import logging
from typing import Sequence

from groq import APIStatusError, Groq
from pydantic import ValidationError

from ..catalog.models import CatalogItem
from ..filtering.models import FilterResult
from ..recommendations.models import AIResponse
from .config import DEFAULT_LLM_CONFIG, LLMConfig

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an AI Product Advisor. "
    "Given a user's description of their needs and a list of products, "
    "recommend the products that best match and explain each choice.\n\n"
    "Return ONLY valid JSON in this exact format:\n"
    '{"recommendations": [{"product": {"brand": "<exact brand from catalog>", '
    '"product_name": "<exact product name from catalog>", "price": <exact price number>, '
    '"category": "<exact category from catalog>", "description": "<exact description from catalog>"}, '
    '"match_score": <number between 1 and 10>, '
    '"explanation": "<why this product matches the user\'s needs>"}], '
    '"summary": "<brief summary of why these products were chosen>"}\n'
    "Include only products from the provided list."
)

NOT_CONFIGURED_SUMMARY = "AI service is not configured."
PARSE_ERROR_SUMMARY = "Unable to parse AI response. Please try again."


def _products_json(products: Sequence[CatalogItem]) -> str:
    return json.dumps([p.model_dump() for p in products], indent=2, ensure_ascii=False)


def _build_user_message(
    user_query: str,
    products: Sequence[CatalogItem],
    filter_result: FilterResult | None,
) -> str:
    lines = [f'User Query: "{user_query}"', ""]

    if filter_result is not None:
        lines.append(
            f"Pre-filtered Products ({filter_result.filtered_count} most relevant "
            f"out of {filter_result.original_count} total):"
        )
        lines.append(_products_json(products))
        lines.append("")
        lines.append(f"Filter Applied: {filter_result.filter_reason}")
        lines.append("")
        lines.append("Recommend 3-5 of these pre-selected relevant products.")
    else:
        lines.append(f"All Available Products ({len(products)} total):")
        lines.append(_products_json(products))
        lines.append("")
        lines.append("Note: No filtering applied - analyzing complete product catalog.")
        lines.append("Recommend 5-8 of the available products.")

    lines.append("Include match scores (1-10) based on how well each product fits the requirements.")
    return "\n".join(lines)


def _strip_code_fence(content: str) -> str:
    cleaned = content.strip()
    if cleaned.startswith("```json"):
        cleaned = cleaned[len("```json"):].lstrip("\n")
        if cleaned.endswith("```"):
            cleaned = cleaned[: -len("```")].rstrip("\n")
    return cleaned


def _error_response(summary: str) -> AIResponse:
    return AIResponse(recommendations=[], summary=summary, error=True)


def get_ai_recommendations(
    user_query: str,
    products: Sequence[CatalogItem],
    filter_result: FilterResult | None = None,
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> AIResponse:
    """
    Ask the Groq LLM to pick and explain products for *user_query*.

    *filter_result* is the smart filter output that produced *products*, or
    ``None`` when the full catalog is being sent. Never raises: failures come
    back as an ``AIResponse`` with ``error=True`` and a human readable summary.
    """
    if not config.enabled or not config.api_key:
        return _error_response(NOT_CONFIGURED_SUMMARY)

    try:
        client = Groq(api_key=config.api_key, timeout=config.timeout)
        response = client.chat.completions.create(
            model=config.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": _build_user_message(user_query, products, filter_result),
                },
            ],
            max_tokens=config.max_tokens,
            temperature=config.temperature,
            response_format={"type": "json_object"},
        )
    except APIStatusError as exc:
        logger.warning("Groq API returned an error status", exc_info=True)
        return _error_response(f"API Error ({exc.status_code}): {exc.message}")
    except Exception as exc:
        logger.warning("Groq LLM call failed", exc_info=True)
        return _error_response(f"Error connecting to AI service: {exc}")

    if not response.choices:
        logger.warning("Groq response contained no choices")
        return _error_response(PARSE_ERROR_SUMMARY)

    content = response.choices[0].message.content or ""
    try:
        return AIResponse.model_validate(json.loads(_strip_code_fence(content)))
    except (json.JSONDecodeError, ValidationError):
        logger.warning("Could not parse AI response: %r", content, exc_info=True)
        return _error_response(PARSE_ERROR_SUMMARY)
