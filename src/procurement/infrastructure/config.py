"""Runtime configuration loaded from the environment.

Values may also come from a ``.env`` file in the working directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_API_URL = "http://localhost:8081/api"


@dataclass(frozen=True)
class Settings:

    api_url: str = DEFAULT_API_URL
    api_timeout: float = 15.0
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, env_file: Path | None = None) -> Settings:
        """Build settings from ``PROCUREMENT_*`` environment variables.

        Raises ValueError when a value cannot be parsed.
        """
        if env_file is not None:
            load_dotenv(env_file)
        else:
            load_dotenv()

        raw_timeout = os.getenv("PROCUREMENT_API_TIMEOUT", "15")
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(
                f"PROCUREMENT_API_TIMEOUT must be a number, got {raw_timeout!r}"
            ) from None
        if timeout <= 0:
            raise ValueError("PROCUREMENT_API_TIMEOUT must be positive")

        log_level = os.getenv("PROCUREMENT_LOG_LEVEL", "WARNING").upper()
        if log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown PROCUREMENT_LOG_LEVEL {log_level!r}")

        return cls(
            api_url=os.getenv("PROCUREMENT_API_URL", DEFAULT_API_URL).rstrip("/"),
            api_timeout=timeout,
            log_level=log_level,
        )
