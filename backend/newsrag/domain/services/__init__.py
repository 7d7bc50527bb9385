# newsrag/domain/services/__init__.py
"""
Domain Services - Use-case orchestration built on ports
"""
