# config/settings/test.py
"""
Test environment settings.

This file is used exclusively for running tests.
"""

from .base import *

# Force test environment (in-memory store and index, fake providers)
ENVIRONMENT = "test"
os.environ["ENVIRONMENT"] = "test"

ALLOWED_HOSTS = ["testserver", "localhost"]

# Disable external API calls in tests
JINA_API_KEY = "test-key"
GEMINI_API_KEY = "test-key"

# Keep test output quiet; tests assert on caplog instead
LOGGING["handlers"] = {"console": {"class": "logging.NullHandler"}}
LOGGING["loggers"]["newsrag"] = {"level": "DEBUG", "propagate": True}
LOGGING["root"]["handlers"] = ["console"]
