# newsrag/adapters/llm/gemini.py
"""
Gemini LLM Provider Adapter

Implements ILLMProvider over the Google Generative Language REST API.
"""
import logging
from typing import Optional

import requests

from newsrag.domain.models import GenerationFailure

logger = logging.getLogger(__name__)


class GeminiLLM:
    """
    Gemini generateContent adapter

    Sends the whole grounded prompt as a single user message.
    """

    def __init__(self, api_url: str, api_key: str, timeout: float = 60.0):
        """
        Initialize Gemini client

        Args:
            api_url: Full generateContent URL
                (e.g. .../v1beta/models/gemini-2.0-flash:generateContent)
            api_key: Google API key
            timeout: Request timeout in seconds
        """
        if not api_url:
            raise ValueError("Gemini API URL is required")
        if not api_key:
            raise ValueError("Gemini API key is required")

        self.api_url = api_url
        self.api_key = api_key
        self.timeout = timeout
        self.model = api_url.rsplit("/", 1)[-1].split(":", 1)[0]
        self.session = requests.Session()

    def generate(self, prompt: str) -> Optional[str]:
        """
        Generate a completion

        Returns:
            Text of the first candidate's first part, or None if absent

        Raises:
            GenerationFailure: If the request fails
        """
        payload = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
        headers = {"Content-Type": "application/json", "x-goog-api-key": self.api_key}

        try:
            response = self.session.post(
                self.api_url, headers=headers, json=payload, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Gemini request failed: {e}")
            raise GenerationFailure(f"Generation request failed: {e}") from e

        if response.status_code >= 400:
            detail = _error_detail(response)
            logger.error(f"Gemini API error {response.status_code}: {detail}")
            raise GenerationFailure(f"API error {response.status_code}: {detail}")

        try:
            data = response.json()
        except ValueError as e:
            raise GenerationFailure(f"Invalid JSON from Gemini: {e}") from e

        try:
            return data["candidates"][0]["content"]["parts"][0]["text"] or None
        except (KeyError, IndexError, TypeError):
            logger.warning("Gemini response had no candidate text")
            return None


def _error_detail(response) -> str:
    try:
        return str(response.json().get("error", {}).get("message") or response.text)
    except ValueError:
        return response.text
