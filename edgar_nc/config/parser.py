"""Submission parser configuration."""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from edgar_nc.config._loader import load_yaml_section


def _get_config() -> dict:
    return load_yaml_section("config.yaml").get("parser", {})


class ParserConfig(BaseSettings):
    """Settings for reading and tokenizing `.nc` submission archives."""
    model_config = SettingsConfigDict(
        env_prefix='NC_PARSER_',
        case_sensitive=False
    )

    # EDGAR archives predate any encoding guarantee; latin-1 never fails to decode
    input_encoding: str = Field(
        default_factory=lambda: _get_config().get('input_encoding', "latin-1")
    )
    allow_continuation_lines: bool = Field(
        default_factory=lambda: _get_config().get('allow_continuation_lines', True)
    )
    input_file_extensions: List[str] = Field(
        default_factory=lambda: _get_config().get('input_file_extensions', ["nc", "txt"])
    )
    default_workers: int = Field(
        default_factory=lambda: _get_config().get('default_workers', 1),
        ge=1,
    )
