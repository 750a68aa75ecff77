"""
dupfinder - Configuration via Pydantic Settings.

All values come from environment variables prefixed ``DUPFINDER_``.
Command-line flags override them.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class DupFinderSettings(BaseSettings):
    """dupfinder configuration loaded from environment variables."""

    # Logging
    log_level: str = "WARNING"
    log_format: str = "console"  # "console" or "json"
    log_colors: bool = False  # colorized console renderer

    # Deletion
    use_trash: bool = False  # send2trash instead of os.remove

    # Scan
    progress_interval: int = 100  # hashed files between progress callbacks

    model_config = {"env_prefix": "DUPFINDER_", "case_sensitive": False}


@lru_cache
def get_settings() -> DupFinderSettings:
    """Factory for dupfinder settings (cached singleton)."""
    return DupFinderSettings()
