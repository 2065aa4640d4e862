"""Configuration module for the collection notifier.

Loads and validates notifier settings from environment variables or .env file.

Created: 2026-10-19
Version: 1.0.0
"""

from collection_notifier.config.settings import NotifierConfig

__all__ = ["NotifierConfig"]

# Global settings instance
settings = NotifierConfig()
