"""
Configuration from environment variables.

Environment is loaded from .env.local (local dev) or .env in the working
directory, then read into a validated Settings model. Process environment
variables always win over values from the files. Empty variables count as
unset.

Variables:
    DOCSEARCH_MAX_RESULTS: Maximum number of results per query (default: 5)
    LOG_LEVEL: Console log level (default: INFO)
    DOCSEARCH_LOG_FILE: Base path of the rotating log file (default: none)
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    max_result_document_count: int = Field(
        default=5,
        ge=1,
        le=1000,
        description="Maximum number of documents returned per query"
    )
    log_level: str = Field(default="INFO", description="Console log level")
    log_file: Optional[str] = Field(
        default=None,
        description="Base path of the rotating log file; console only when unset"
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"Unknown log level: {value}")
        return value

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


_settings: Optional[Settings] = None


def load_env_files(root: Optional[Path] = None) -> Optional[Path]:
    """
    Load .env.local first (highest priority), then .env as fallback.

    Args:
        root: Directory holding the env files (default: working directory)

    Returns:
        Path of the loaded file, or None when only the process
        environment is used
    """
    if root is None:
        root = Path.cwd()

    for candidate in (root / ".env.local", root / ".env"):
        if candidate.exists():
            load_dotenv(candidate, override=False)
            return candidate
    return None


def get_settings(reload: bool = False) -> Settings:
    """
    Get cached settings, reading the environment on first use.

    Args:
        reload: Re-read .env files and the environment

    Raises:
        pydantic.ValidationError: Invalid values (e.g. DOCSEARCH_MAX_RESULTS=0)
    """
    global _settings

    if _settings is not None and not reload:
        return _settings

    env_path = load_env_files()
    values = {
        "max_result_document_count": os.getenv("DOCSEARCH_MAX_RESULTS") or "5",
        "log_level": os.getenv("LOG_LEVEL") or "INFO",
        "log_file": os.getenv("DOCSEARCH_LOG_FILE") or None,
    }
    _settings = Settings(**values)
    logger.debug(f"Settings loaded (env file: {env_path or 'none'}): {_settings}")
    return _settings
