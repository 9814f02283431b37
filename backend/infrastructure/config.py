"""Configuration utilities for infrastructure layer.

Settings come from environment variables, optionally loaded from a
``.env`` file first.

Example .env:
    LOG_LEVEL=DEBUG
    LOG_FORMAT=json
    APP_TIMEZONE=Asia/Tokyo
    BCRYPT_ROUNDS=12
    AI_PROVIDER=openai
    OPENAI_API_KEY=sk-...
"""

import os
from dataclasses import dataclass
from datetime import tzinfo
from pathlib import Path
from typing import Optional, Union
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

from domain.user.core.value_objects.password import DEFAULT_BCRYPT_ROUNDS

LOG_FORMATS = ("console", "json")
AI_PROVIDERS = ("stub", "openai")


@dataclass(frozen=True)
class Settings:
    """
    Application settings.

    Attributes:
        log_level: stdlib level name (DEBUG, INFO, ...)
        log_format: "console" (human readable) or "json"
        timezone: IANA name of the timezone "today" is evaluated in
        bcrypt_rounds: bcrypt cost factor
        ai_provider: "stub" or "openai"
        openai_api_key: Required when ai_provider is "openai"
        openai_model: Chat model for advice and PFC estimates
    """

    log_level: str = "INFO"
    log_format: str = "console"
    timezone: str = "Asia/Tokyo"
    bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS
    ai_provider: str = "stub"
    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o-mini"

    def __post_init__(self) -> None:
        if self.log_format not in LOG_FORMATS:
            raise ValueError(f"LOG_FORMAT must be one of {LOG_FORMATS}, got {self.log_format!r}")
        if self.ai_provider not in AI_PROVIDERS:
            raise ValueError(f"AI_PROVIDER must be one of {AI_PROVIDERS}, got {self.ai_provider!r}")
        # bcrypt accepts cost factors 4..31
        if not 4 <= self.bcrypt_rounds <= 31:
            raise ValueError(f"BCRYPT_ROUNDS must be between 4 and 31, got {self.bcrypt_rounds}")

    @classmethod
    def from_env(cls, env_file: Optional[Union[str, Path]] = None) -> "Settings":
        """
        Build settings from the environment.

        Args:
            env_file: Optional .env path loaded first (existing
                environment variables win)

        Returns:
            Settings with defaults for unset variables
        """
        if env_file is not None:
            load_dotenv(env_file)

        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_format=os.getenv("LOG_FORMAT", "console").lower(),
            timezone=os.getenv("APP_TIMEZONE", "Asia/Tokyo"),
            bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", str(DEFAULT_BCRYPT_ROUNDS))),
            ai_provider=os.getenv("AI_PROVIDER", "stub").lower(),
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
            openai_model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
        )

    def tzinfo(self) -> tzinfo:
        """Resolve ``timezone`` to a tzinfo."""
        return ZoneInfo(self.timezone)
