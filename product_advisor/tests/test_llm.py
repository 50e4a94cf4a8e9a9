import json
from unittest.mock import MagicMock, patch

import httpx
from groq import APIStatusError

from product_advisor.catalog.models import CatalogItem
from product_advisor.filtering.models import FilterResult
from product_advisor.llm.config import LLMConfig
from product_advisor.llm.groq_client import (
    NOT_CONFIGURED_SUMMARY,
    PARSE_ERROR_SUMMARY,
    get_ai_recommendations,
)

SAMPLE_PRODUCTS = [
    CatalogItem(brand="Philips", product_name="Air Fryer XL", price=8499, category="Kitchen Appliances", description="Crispy meals with little oil."),
    CatalogItem(brand="Prestige", product_name="Induction Cooktop", price=2899, category="Kitchen Appliances", description="Energy efficient cooking."),
]

SAMPLE_FILTER = FilterResult(
    filtered_products=SAMPLE_PRODUCTS,
    filter_reason="Categories: Kitchen Appliances",
    original_count=26,
    filtered_count=2,
)

LLM_PAYLOAD = {
    "recommendations": [
        {
            "product": SAMPLE_PRODUCTS[0].model_dump(),
            "match_score": 9,
            "explanation": "Healthy frying with minimal oil.",
        },
        {
            "product": SAMPLE_PRODUCTS[1].model_dump(),
            "match_score": 6,
            "explanation": "Fast everyday cooking.",
        },
    ],
    "summary": "Two efficient kitchen picks.",
}

ENABLED_CONFIG = LLMConfig(api_key="test-key", enabled=True)
DISABLED_CONFIG = LLMConfig(api_key="test-key", enabled=False)


def _mock_groq_response(content: str) -> MagicMock:
    message = MagicMock()
    message.content = content
    choice = MagicMock()
    choice.message = message
    response = MagicMock()
    response.choices = [choice]
    return response


@patch("product_advisor.llm.groq_client.Groq")
def test_returns_recommendations(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.return_value = _mock_groq_response(
        json.dumps(LLM_PAYLOAD)
    )

    result = get_ai_recommendations("healthy cooking", SAMPLE_PRODUCTS, SAMPLE_FILTER, config=ENABLED_CONFIG)

    assert result.error is False
    assert result.summary == "Two efficient kitchen picks."
    assert [r.match_score for r in result.recommendations] == [9, 6]
    assert result.recommendations[0].product == SAMPLE_PRODUCTS[0]


@patch("product_advisor.llm.groq_client.Groq")
def test_strips_markdown_fence(mock_groq_cls):
    fenced = "```json\n" + json.dumps(LLM_PAYLOAD) + "\n```"
    mock_groq_cls.return_value.chat.completions.create.return_value = _mock_groq_response(fenced)

    result = get_ai_recommendations("healthy cooking", SAMPLE_PRODUCTS, config=ENABLED_CONFIG)

    assert result.error is False
    assert len(result.recommendations) == 2


@patch("product_advisor.llm.groq_client.Groq")
def test_prompt_mentions_filter_trace(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.return_value = _mock_groq_response(
        json.dumps(LLM_PAYLOAD)
    )

    get_ai_recommendations("healthy cooking", SAMPLE_PRODUCTS, SAMPLE_FILTER, config=ENABLED_CONFIG)

    kwargs = mock_groq_cls.return_value.chat.completions.create.call_args.kwargs
    user_message = kwargs["messages"][1]["content"]
    assert "Pre-filtered Products (2 most relevant out of 26 total)" in user_message
    assert "Filter Applied: Categories: Kitchen Appliances" in user_message
    assert '"healthy cooking"' in user_message


@patch("product_advisor.llm.groq_client.Groq")
def test_prompt_without_filter_sends_full_catalog(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.return_value = _mock_groq_response(
        json.dumps(LLM_PAYLOAD)
    )

    get_ai_recommendations("healthy cooking", SAMPLE_PRODUCTS, None, config=ENABLED_CONFIG)

    kwargs = mock_groq_cls.return_value.chat.completions.create.call_args.kwargs
    user_message = kwargs["messages"][1]["content"]
    assert "All Available Products (2 total)" in user_message
    assert "Filter Applied" not in user_message


@patch("product_advisor.llm.groq_client.Groq")
def test_bad_json(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.return_value = _mock_groq_response("not valid json{{{")

    result = get_ai_recommendations("healthy cooking", SAMPLE_PRODUCTS, config=ENABLED_CONFIG)

    assert result.error is True
    assert result.recommendations == []
    assert result.summary == PARSE_ERROR_SUMMARY


@patch("product_advisor.llm.groq_client.Groq")
def test_connection_error(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.side_effect = Exception("API timeout")

    result = get_ai_recommendations("healthy cooking", SAMPLE_PRODUCTS, config=ENABLED_CONFIG)

    assert result.error is True
    assert result.summary == "Error connecting to AI service: API timeout"


@patch("product_advisor.llm.groq_client.Groq")
def test_api_status_error(mock_groq_cls):
    request = httpx.Request("POST", "https://api.groq.com/openai/v1/chat/completions")
    response = httpx.Response(429, request=request)
    mock_groq_cls.return_value.chat.completions.create.side_effect = APIStatusError(
        "Rate limit reached", response=response, body=None,
    )

    result = get_ai_recommendations("healthy cooking", SAMPLE_PRODUCTS, config=ENABLED_CONFIG)

    assert result.error is True
    assert result.summary == "API Error (429): Rate limit reached"


def test_disabled():
    result = get_ai_recommendations("healthy cooking", SAMPLE_PRODUCTS, config=DISABLED_CONFIG)

    assert result.error is True
    assert result.summary == NOT_CONFIGURED_SUMMARY


def test_missing_api_key():
    result = get_ai_recommendations("healthy cooking", SAMPLE_PRODUCTS, config=LLMConfig(api_key=""))

    assert result.error is True
    assert result.summary == NOT_CONFIGURED_SUMMARY


@patch("product_advisor.llm.groq_client.Groq")
def test_empty_choices(mock_groq_cls):
    response = MagicMock()
    response.choices = []
    mock_groq_cls.return_value.chat.completions.create.return_value = response

    result = get_ai_recommendations("healthy cooking", SAMPLE_PRODUCTS, config=ENABLED_CONFIG)

    assert result.error is True
    assert result.recommendations == []
    assert result.summary == PARSE_ERROR_SUMMARY
