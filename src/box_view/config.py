"""
Configuration management for the Box View client.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = ConfigDict(env_file=".env", env_prefix="BOX_VIEW_")

    api_key: Optional[str] = None
    protocol: str = "https"
    host: str = "view-api.box.com"
    api_version: str = "1"
    timeout_seconds: int = 30
    debug: bool = False
    log_level: str = "INFO"


def get_settings() -> Settings:
    return Settings()


@dataclass
class SDKConfig:
    """Logging configuration for client operations."""

    debug: bool = False
    log_level: str = "INFO"

    def setup_logging(self) -> None:
        """Configure logging for the client."""
        level_name = "DEBUG" if self.debug else self.log_level
        level = getattr(logging, level_name.upper(), logging.INFO)

        logger = logging.getLogger("box_view")
        logger.setLevel(level)

        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(f"box_view.{name}")
