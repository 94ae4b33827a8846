"""Configuration for engine validation.

Constants describe where engine constraints live and how each known engine is
resolved. ``Settings`` carries the handful of environment-driven knobs used by
the command line wrapper; the library entrypoints never read the environment.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass


MANIFEST_NAME = "package.json"
ENGINES_NAMESPACE = "engines"

# Engines whose version is that of the interpreter running this process.
INTERPRETER_ENGINES = frozenset({"python"})
# Engines resolved by running ``<engine> --version``.
PROBED_ENGINES = ("node", "npm")

LOG_LEVEL_ENV_VAR = "ENGINE_VALIDATOR_LOG_LEVEL"
WARN_ONLY_ENV_VAR = "ENGINE_VALIDATOR_WARN_ONLY"
DEFAULT_LOG_LEVEL = "WARNING"

_TRUTHY = {"1", "true", "yes", "y"}


class ConfigError(ValueError):
    """Raised when an environment setting holds an unusable value."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Environment-derived settings for the command line."""

    log_level: str = DEFAULT_LOG_LEVEL
    warn_only: bool = False


def _is_truthy(value: str | None) -> bool:
    return (value or "").strip().lower() in _TRUTHY


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from ``environ`` (defaults to ``os.environ``)."""
    env = os.environ if environ is None else environ

    log_level = (env.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL).strip().upper()
    if log_level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        raise ConfigError(f"{LOG_LEVEL_ENV_VAR} has invalid level {log_level!r}")

    return Settings(log_level=log_level, warn_only=_is_truthy(env.get(WARN_ONLY_ENV_VAR)))
