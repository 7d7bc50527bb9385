# backend/config/settings/development.py
from .base import *

DEBUG = True

# Prompt and cache activity at debug level
LOGGING['handlers']['console']['level'] = 'DEBUG'
LOGGING['loggers']['newsrag']['level'] = 'DEBUG'
