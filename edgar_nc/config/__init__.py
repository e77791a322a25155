"""
edgar-nc Configuration Package.

This module uses Pydantic Settings to:
1. Define the schema for all configuration
2. Load defaults from configs/config.yaml
3. Automatically override with environment variables from .env

Usage:
    from edgar_nc.config import settings

    encoding = settings.parser.input_encoding
    extensions = settings.parser.input_file_extensions
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from edgar_nc.config._loader import load_yaml_section, clear_config_cache
from edgar_nc.config.parser import ParserConfig


class Settings(BaseSettings):
    """
    Main settings class that combines all configuration sections.

    Usage:
        from edgar_nc.config import settings

        settings.parser.allow_continuation_lines
    """
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    parser: ParserConfig = Field(default_factory=ParserConfig)


# ===========================
# Global Settings Instance
# ===========================

settings = Settings()


__all__ = [
    "settings",
    "Settings",
    "ParserConfig",
    "load_yaml_section",
    "clear_config_cache",
]
