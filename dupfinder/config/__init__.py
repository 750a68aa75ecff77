"""Settings and logging setup for dupfinder."""

from dupfinder.config.logging import configure_logging
from dupfinder.config.settings import DupFinderSettings, get_settings

__all__ = [
    "DupFinderSettings",
    "configure_logging",
    "get_settings",
]
