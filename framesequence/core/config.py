"""Global configuration for framesequence.

Settings can be overridden via environment variables or explicit configuration.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


@dataclass
class FrameSequenceConfig:
    """Top-level configuration for framesequence."""

    # Expansion safety bound; None expands ranges of any size
    max_frames: int | None = None

    # CLI
    log_level: str = "WARNING"
    separator: str = ","

    @property
    def logging_level(self) -> int:
        """Numeric level for log_level; unknown names fall back to WARNING."""
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.WARNING

    @classmethod
    def from_env(cls) -> FrameSequenceConfig:
        """Build config from environment variables, falling back to defaults."""
        config = cls()

        if val := os.environ.get("FRAMESEQUENCE_MAX_FRAMES"):
            config.max_frames = int(val)
        if val := os.environ.get("FRAMESEQUENCE_LOG_LEVEL"):
            config.log_level = val.upper()
        if val := os.environ.get("FRAMESEQUENCE_SEPARATOR"):
            config.separator = val

        return config


# Module-level singleton
_config: FrameSequenceConfig | None = None


def get_config() -> FrameSequenceConfig:
    """Return the global config, lazily initialized from env."""
    global _config
    if _config is None:
        _config = FrameSequenceConfig.from_env()
    return _config


def set_config(config: FrameSequenceConfig | None) -> None:
    """Override the global config (useful in tests). None forces a reload from env."""
    global _config
    _config = config
