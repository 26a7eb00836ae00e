"""
Configuration

Settings are read from the environment, with an optional `.env` file loaded
first. Supported variables:

- MERKLE_HASH_ALGORITHM: hashlib algorithm name used for leaves and nodes
- MERKLE_LOG_LEVEL: logging level name for the CLI
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .constants import DEFAULT_HASH_ALGORITHM, DEFAULT_LOG_LEVEL

# Load environment variables
load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Runtime settings resolved from the environment."""
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_value(self) -> int:
        """Numeric logging level, falling back to INFO for unknown names."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings(
        hash_algorithm=os.getenv("MERKLE_HASH_ALGORITHM", DEFAULT_HASH_ALGORITHM),
        log_level=os.getenv("MERKLE_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )
