# newsrag/domain/__init__.py
"""
Domain Layer - Pure Python Business Logic

This package contains the core logic of the news chat backend:
sessions, caching, retrieval, prompt assembly and orchestration.
It has ZERO dependencies on Django, Redis, Qdrant or model SDKs.

Key principles:
- Pure Python (no framework imports)
- Fully unit testable with fakes
- Independent of delivery mechanism (HTTP, CLI)
"""

__version__ = "1.0.0"
