"""Configuration management for docsym."""

from docsym.config.loader import load_config
from docsym.config.models import Config, DslConfig, LoggingConfig, ParserConfig, ServerConfig

__all__ = ["Config", "DslConfig", "LoggingConfig", "ParserConfig", "ServerConfig", "load_config"]
