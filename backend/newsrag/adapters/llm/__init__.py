# newsrag/adapters/llm/__init__.py
