# newsrag/adapters/feeds/__init__.py
