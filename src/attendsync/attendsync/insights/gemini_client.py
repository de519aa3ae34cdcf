from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

import httpx

from ..core.exceptions import InsightsError
from .client import InsightsClient

logger = logging.getLogger(__name__)

GEMINI_URL_TEMPLATE = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"


class GeminiInsightsClient(InsightsClient):
    """Gemini ``generateContent`` in JSON mode over httpx."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str = "gemini-2.5-flash",
        timeout: float = 25.0,
        temperature: float = 0.2,
        max_tokens: int = 2048,
        http_client: Optional[httpx.Client] = None,
    ):
        self._api_key = api_key
        self._url = GEMINI_URL_TEMPLATE.format(model=model)
        self._temperature = float(temperature)
        self._max_tokens = int(max_tokens)
        self._http = http_client or httpx.Client(timeout=httpx.Timeout(timeout, connect=10.0))

    def _body(self, system_prompt: str, user_prompt: str) -> dict:
        return {
            "generationConfig": {
                "temperature": self._temperature,
                "maxOutputTokens": self._max_tokens,
                "responseMimeType": "application/json",
            },
            "contents": [
                {"role": "user", "parts": [{"text": f"SYSTEM: {system_prompt}"}]},
                {"role": "user", "parts": [{"text": user_prompt}]},
            ],
        }

    def generate_json(self, system_prompt: str, user_prompt: str) -> Dict[str, Any]:
        if not self._api_key:
            raise InsightsError("GEMINI_API_KEY is not configured")

        try:
            r = self._http.post(self._url, params={"key": self._api_key}, json=self._body(system_prompt, user_prompt))
            r.raise_for_status()
            data = r.json()
        except httpx.HTTPError as e:
            logger.error("Gemini request failed: %s", e)
            raise InsightsError("Insights model request failed") from e

        logger.debug("Gemini raw response: %s", data)
        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
            parsed = json.loads(text)
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise InsightsError("Insights model returned an unreadable answer") from e

        if not isinstance(parsed, dict):
            raise InsightsError("Insights model answer is not a JSON object")
        return parsed
