"""
Settings read from the environment, plus the logging setup shared by all layers.
"""

import logging
import os
from dataclasses import dataclass
from typing import Self

ENV_PREFIX = "CUBE_CHESS_"
DEFAULT_DATABASE_URL = "sqlite:///./cube_chess.db"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _env_flag(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    echo_sql: bool = False
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if logging.getLevelName(self.log_level.upper()) not in range(0, 51):
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @classmethod
    def from_env(cls) -> Self:
        """Read CUBE_CHESS_* variables, falling back to the defaults above."""
        return cls(
            database_url=os.getenv(f"{ENV_PREFIX}DATABASE_URL", DEFAULT_DATABASE_URL),
            echo_sql=_env_flag(os.getenv(f"{ENV_PREFIX}ECHO_SQL", "false")),
            log_level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "INFO"),
        )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)
