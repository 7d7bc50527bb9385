# newsrag/adapters/llm/fake.py
"""
Fake LLM Provider for testing

Provides deterministic responses without API calls.
"""
from typing import List, Optional


class FakeLLM:
    """
    Fake LLM implementation for unit testing

    Returns a predetermined response, or raises a predetermined error.
    """

    def __init__(self, response: Optional[str] = "This is a test response", error: Optional[Exception] = None):
        """
        Initialize fake LLM

        Args:
            response: The response to return for all generate() calls
            error: Exception to raise instead of responding
        """
        self.response = response
        self.error = error
        self.prompts: List[str] = []

    @property
    def generate_called(self) -> bool:
        return bool(self.prompts)

    @property
    def last_prompt(self) -> Optional[str]:
        return self.prompts[-1] if self.prompts else None

    def generate(self, prompt: str) -> Optional[str]:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response
