# newsrag/domain/prompts/template.py
"""
Prompt Template Manager

Handles loading and rendering versioned prompt templates.
"""
from pathlib import Path
from typing import Any, Sequence

from jinja2 import Environment, FileSystemLoader

FALLBACK_ANSWER = "Information not available in the retrieved passages."


class PromptTemplate:
    """
    Manages prompt templates using Jinja2

    Templates are versioned and stored in prompts/{version}/ directories.
    """

    def __init__(self, version: str = "v1.0"):
        """
        Initialize prompt template manager

        Args:
            version: Template version to use (e.g., "v1.0")
        """
        self.version = version

        # Get template directory
        base_dir = Path(__file__).parent
        template_dir = base_dir / version

        if not template_dir.exists():
            raise ValueError(f"Template version {version} not found at {template_dir}")

        # Initialize Jinja2 environment
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=False,  # Don't escape for LLM input
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, history: Sequence[Any], query: str, passages: Sequence[Any]) -> str:
        """
        Render the grounded prompt

        Args:
            history: Prior turns (Turn objects or dicts with query/answer)
            query: Current user query
            passages: Retrieved passages (Passage objects or payload dicts)

        Returns:
            Prompt text ending with the "User: <query>" line
        """
        template = self.env.get_template("grounded.j2")
        return template.render(
            history=list(history or []),
            query=query,
            passages=list(passages or []),
            fallback_answer=FALLBACK_ANSWER,
        )


_default_template = None


def build_prompt(history: Sequence[Any], query: str, passages: Sequence[Any]) -> str:
    """Render with the default v1.0 template"""
    global _default_template
    if _default_template is None:
        _default_template = PromptTemplate()
    return _default_template.render(history, query, passages)
