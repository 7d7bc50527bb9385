# newsrag/__init__.py
"""
News RAG chat backend

Sessions and caches in a key-value store, retrieval over a vector
index of news articles, grounded generation by a language model.
"""

__version__ = "1.0.0"
