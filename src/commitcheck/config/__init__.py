"""Configuration loading, schema, and defaults."""

from commitcheck.config.loader import load_config
from commitcheck.config.schema import (
    CommitCheckConfig,
    ConfigurationError,
    Severity,
    normalise_severity,
)

__all__ = [
    "CommitCheckConfig",
    "ConfigurationError",
    "Severity",
    "load_config",
    "normalise_severity",
]
