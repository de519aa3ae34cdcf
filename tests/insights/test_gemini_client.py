from __future__ import annotations

import json

import httpx
import pytest

from attendsync.core.exceptions import InsightsError
from attendsync.insights.gemini_client import GeminiInsightsClient


def _client(handler, api_key="k"):
    http = httpx.Client(transport=httpx.MockTransport(handler))
    return GeminiInsightsClient(api_key=api_key, model="gemini-test", http_client=http)


def test_generate_json_parses_candidate_text():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = request.url
        seen["body"] = json.loads(request.content)
        answer = {"report": "r", "visualizations": [], "insights": "i"}
        return httpx.Response(200, json={"candidates": [{"content": {"parts": [{"text": json.dumps(answer)}]}}]})

    result = _client(handler).generate_json("sys", "user")

    assert result == {"report": "r", "visualizations": [], "insights": "i"}
    assert seen["url"].params["key"] == "k"
    assert seen["url"].path.endswith("/models/gemini-test:generateContent")
    assert seen["body"]["generationConfig"]["responseMimeType"] == "application/json"


def test_http_error_becomes_insights_error():
    client = _client(lambda request: httpx.Response(500, json={"error": "boom"}))

    with pytest.raises(InsightsError):
        client.generate_json("sys", "user")


def test_unreadable_answer_becomes_insights_error():
    client = _client(lambda request: httpx.Response(200, json={"candidates": []}))

    with pytest.raises(InsightsError):
        client.generate_json("sys", "user")


def test_missing_api_key():
    client = _client(lambda request: httpx.Response(200), api_key="")

    with pytest.raises(InsightsError):
        client.generate_json("sys", "user")
