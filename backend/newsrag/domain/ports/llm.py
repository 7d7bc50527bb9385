# newsrag/domain/ports/llm.py

"""
LLM Provider Port - Interface for text generation

This port defines the contract for LLM providers.
Any adapter that implements these methods can be used by the domain.
"""

from typing import Optional, Protocol


class ILLMProvider(Protocol):
    """
    Interface for Large Language Model providers

    One prompt in, one completion out. No streaming.
    """

    def generate(self, prompt: str) -> Optional[str]:
        """
        Generate a completion for a fully assembled prompt

        Args:
            prompt: Grounded prompt text

        Returns:
            Generated text, or None if the provider returned no text

        Raises:
            GenerationFailure: If the provider call fails
        """
        ...
