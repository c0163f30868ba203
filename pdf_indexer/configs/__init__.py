"""
Configuration management module.

Provides type-safe configuration using Pydantic Settings.
"""

from pdf_indexer.configs.settings import IndexerSettings, get_settings

__all__ = ["IndexerSettings", "get_settings"]
