# newsrag/adapters/__init__.py
"""
Adapters - Infrastructure Implementations

Adapters implement port interfaces defined in the domain layer.
They handle all external dependencies (Redis, Qdrant, model APIs, feeds).
"""

__version__ = "1.0.0"
