# newsrag/adapters/embeddings/__init__.py
