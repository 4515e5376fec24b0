"""
Configuration for the in-memory game service.

Values can be overridden with environment variables:
    BLOKLI_CODE_LENGTH  length of generated join codes (default 6)
    BLOKLI_LOG_LEVEL    logging level name (default INFO)
"""

import logging
import os
from dataclasses import dataclass

# Join code alphabet without look-alike glyphs (no I, O, 0, 1)
DEFAULT_CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"


@dataclass
class ServiceConfig:
    """
    Structured service configuration.

    Attributes:
        code_length: Number of characters in a join code
        code_alphabet: Characters join codes are drawn from
        log_level: Level the entry point passes to setup_logging
    """

    code_length: int = 6
    code_alphabet: str = DEFAULT_CODE_ALPHABET
    log_level: int = logging.INFO

    def __post_init__(self):
        if self.code_length < 1:
            raise ValueError(f"code_length must be positive, got {self.code_length}")
        if not self.code_alphabet:
            raise ValueError("code_alphabet must not be empty")

    @classmethod
    def from_env(cls) -> "ServiceConfig":
        """Build a config from BLOKLI_* environment variables."""
        level_name = os.getenv("BLOKLI_LOG_LEVEL", "INFO").upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level_name}")
        return cls(
            code_length=int(os.getenv("BLOKLI_CODE_LENGTH", "6")),
            log_level=level,
        )
