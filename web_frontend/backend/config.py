"""
Backend Configuration.

Values are read from HDBSCAN_UI_* environment variables when present.
"""

from dataclasses import dataclass, field
from typing import List
import os


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.environ.get(name)
    if not raw:
        return list(default)
    return [item.strip() for item in raw.split(',') if item.strip()]


@dataclass
class AppConfig:
    """Application configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    # Live validation
    default_debounce_ms: int = 300
    max_debounce_ms: int = 5000

    # Session management
    session_idle_seconds: int = 1800  # Close live sessions idle for 30 minutes

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """Build configuration from the environment, falling back to defaults."""
        defaults = cls()
        return cls(
            host=os.environ.get('HDBSCAN_UI_HOST', defaults.host),
            port=int(os.environ.get('HDBSCAN_UI_PORT', defaults.port)),
            cors_origins=_env_list('HDBSCAN_UI_CORS_ORIGINS', defaults.cors_origins),
            log_level=os.environ.get('HDBSCAN_UI_LOG_LEVEL', defaults.log_level).upper(),
            default_debounce_ms=int(
                os.environ.get('HDBSCAN_UI_DEBOUNCE_MS', defaults.default_debounce_ms)
            ),
            max_debounce_ms=int(
                os.environ.get('HDBSCAN_UI_MAX_DEBOUNCE_MS', defaults.max_debounce_ms)
            ),
            session_idle_seconds=int(
                os.environ.get('HDBSCAN_UI_SESSION_IDLE_SECONDS', defaults.session_idle_seconds)
            ),
        )


# Global config instance
config = AppConfig.from_env()
