"""
CLI Configuration

Settings for the httpcall command line, read from HTTPCALL_* environment
variables and overridden by command-line flags.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from httpcall.config import RuntimeConfig
from httpcall.config.runtime import ENV_PREFIX


@dataclass
class CLIConfig:
    """Main CLI configuration."""

    # Client and renderer settings
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)

    # Logging
    log_level: str = "WARNING"
    log_file: str | None = None


def load_config() -> CLIConfig:
    """Load configuration from the environment."""
    config = CLIConfig(runtime=RuntimeConfig.from_env())
    config.log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL", config.log_level)
    config.log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE")
    return config
