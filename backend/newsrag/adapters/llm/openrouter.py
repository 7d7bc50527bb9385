# newsrag/adapters/llm/openrouter.py
"""
OpenRouter LLM Provider Adapter

Implements ILLMProvider using OpenRouter API for accessing multiple LLM models.
"""
import logging
from typing import Optional

import openai

from newsrag.domain.models import GenerationFailure

logger = logging.getLogger(__name__)


class OpenRouterLLM:
    """
    OpenRouter API adapter for LLM access

    Provides access to multiple LLM models through unified API.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://openrouter.ai/api/v1",
        model: str = "gpt-4o-mini",
        temperature: float = 0.1,
        max_tokens: int = 1000,
    ):
        """
        Initialize OpenRouter LLM client

        Args:
            api_key: OpenRouter API key
            base_url: API base URL
            model: Model identifier
            temperature: Sampling temperature (0.0-1.0)
            max_tokens: Maximum tokens to generate
        """
        if not api_key:
            raise ValueError("OpenRouter API key is required")

        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

        # OpenAI client is compatible with OpenRouter
        self.client = openai.OpenAI(api_key=api_key, base_url=base_url.rstrip("/"))

        self.tokens_used = {"input": 0, "output": 0, "total": 0}

    def generate(self, prompt: str) -> Optional[str]:
        """
        Generate completion using OpenRouter

        Raises:
            GenerationFailure: If the API call fails
        """
        try:
            logger.debug(
                f"Generating completion with model={self.model}, "
                f"temp={self.temperature}, max_tokens={self.max_tokens}"
            )

            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                stream=False,
            )

        except openai.RateLimitError as e:
            logger.error(f"Rate limit exceeded: {e}")
            raise GenerationFailure(f"Rate limit exceeded: {e}") from e

        except openai.APIError as e:
            logger.error(f"OpenRouter API error: {e}")
            raise GenerationFailure(f"API error: {e}") from e

        if getattr(response, "usage", None):
            self.tokens_used = {
                "input": response.usage.prompt_tokens,
                "output": response.usage.completion_tokens,
                "total": response.usage.total_tokens,
            }
            logger.info(f"Tokens used: {self.tokens_used['total']}")

        if not response.choices:
            return None
        return response.choices[0].message.content

    def get_last_usage(self) -> dict:
        """Get token usage from last call"""
        return self.tokens_used
