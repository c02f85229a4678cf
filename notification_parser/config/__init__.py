"""Configuration management."""
from .settings import *
from .keyword_config_loader import (
    ConfigurationError,
    KeywordConfig,
    KeywordConfigLoader,
    get_keyword_config,
)

__all__ = ['ConfigurationError', 'KeywordConfig', 'KeywordConfigLoader', 'get_keyword_config']
