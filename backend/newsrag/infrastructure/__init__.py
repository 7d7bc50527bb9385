# newsrag/infrastructure/__init__.py
"""
Infrastructure Layer - Cross-Cutting Concerns

This layer handles:
- Dependency injection (container)
- Configuration management
- Store health checks
"""

__version__ = "1.0.0"
