# newsrag/domain/prompts/__init__.py
"""
Prompt Templates - Versioned Jinja2 Templates

Prompts are treated as code: versioned, tested, and tracked.
Each version is immutable to ensure reproducibility.
"""
