# newsrag/adapters/retrieval/__init__.py
