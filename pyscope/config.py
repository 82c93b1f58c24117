"""Configuration management for pyscope."""

import logging
import sys
from typing import Literal, Optional

import structlog
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """pyscope configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="PYSCOPE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "console"

    # Analysis thresholds
    max_line_length: int = 79
    complexity_threshold: int = 10
    nesting_threshold: int = 3

    # Data-flow usage matching
    mention_strategy: Literal["substring", "token"] = "substring"

    # API Configuration
    max_code_size_bytes: int = 1048576  # 1MB


settings = Settings()


def configure_logging(config: Optional[Settings] = None, quiet: bool = False) -> None:
    """
    Configure structlog for the process.

    Args:
        config: Settings to read level and format from (defaults to module settings)
        quiet: Only let errors through
    """
    config = config or settings
    level = logging.ERROR if quiet else logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer()
            if config.log_format == "json"
            else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
