# newsrag/adapters/store/__init__.py
