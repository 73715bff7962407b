"""Configuration management."""

import logging
from functools import cache

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings

from .consts import MAX_DISTANCE_DIFF_RATIO, PACKAGE_NAME


class Config(BaseSettings):
    """Configuration for suggestion ranking."""

    model_config = ConfigDict(
        env_prefix="XMLSUGGEST_", case_sensitive=False, extra="ignore"
    )
    log_level: str = Field(
        default="INFO",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
        description="Logging level",
    )
    max_distance_ratio: float = Field(
        default=MAX_DISTANCE_DIFF_RATIO,
        gt=0,
        le=1,
        description="Edit distance allowed per character of the candidate name",
    )


@cache
def get_config() -> Config:
    """Get a cached Config instance."""
    return Config()


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Configure root logging for an application embedding this package.

    Every module logs through its own ``xml-suggest.<module>`` logger, so the
    level set here applies to all of them. The library never calls this
    itself; hosts that manage logging can skip it.

    Args:
        log_level: Level name such as ``"DEBUG"``; unknown names fall back to
            INFO.

    Returns:
        The ``xml-suggest`` package logger.
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,  # Override any existing configuration
    )
    return logging.getLogger(PACKAGE_NAME)
