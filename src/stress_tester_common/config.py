"""Environment-backed configuration for stress tester processes."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


@dataclass(frozen=True)
class AppConfig:
    env: str = field(default_factory=lambda: _env("STRESS_TESTER_ENV", "production"))
    log_level: str = field(default_factory=lambda: _env("STRESS_TESTER_LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: _env("STRESS_TESTER_LOG_FILE"))

    @property
    def is_development(self) -> bool:
        return self.env == "development"


@dataclass(frozen=True)
class Settings:
    app: AppConfig = field(default_factory=AppConfig)


def load_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings()
