"""
Configuration module for partlog.
"""

from .loader import deep_merge, load_config
from .schema import AppConfig, LoggerConfig, LoggingConfig

__all__ = [
    "load_config",
    "deep_merge",
    "AppConfig",
    "LoggerConfig",
    "LoggingConfig",
]
