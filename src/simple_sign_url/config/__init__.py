"""
Configuration management for simple-sign-url
"""

from .settings import (
    SignUrlSettings,
    LoggingConfig,
    load_settings,
    ENV_PREFIX,
)

__all__ = [
    'SignUrlSettings',
    'LoggingConfig',
    'load_settings',
    'ENV_PREFIX',
]
