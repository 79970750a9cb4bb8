from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

# ------------------------------------------------------------
# Errors / helpers
# ------------------------------------------------------------


class ConfigError(RuntimeError):
    pass


def _as_bool(v: str) -> bool:
    return v.strip().lower() in {"1", "true", "yes", "on"}


def _as_int(v: str, default: int) -> int:
    try:
        return int(v)
    except (TypeError, ValueError):
        return default


# ------------------------------------------------------------
# Logging environment (SAFE ANYWHERE)
# ------------------------------------------------------------


@dataclass(frozen=True)
class LoggingEnvironment:
    log_level: str
    log_retention: int
    verbose: bool
    quiet: bool


def get_logging_env() -> LoggingEnvironment:
    log_level = os.environ.get("LOG_LEVEL", "INFO")
    log_retention = _as_int(os.environ.get("LOG_RETENTION", "30"), 30)

    verbose = _as_bool(os.environ.get("DIRTRUNCATOR_VERBOSE", "0"))
    quiet = _as_bool(os.environ.get("DIRTRUNCATOR_QUIET", "0"))

    return LoggingEnvironment(
        log_level=log_level,
        log_retention=log_retention,
        verbose=verbose,
        quiet=quiet,
    )


# ------------------------------------------------------------
# Full runtime environment
# ------------------------------------------------------------


class Environment:
    """
    Snapshot of the environment a truncation run is configured from.

    Command line options take precedence; these values only act as
    defaults so a scheduler can drive the tool from a .env file.
    """

    def __init__(self):
        # Logging snapshot (immutable)
        self._logging = get_logging_env()

        self.command = os.environ.get("DIRTRUNCATOR_COMMAND", "truncate")
        self.target = os.environ.get("DIRTRUNCATOR_TARGET", "")

        # Kept raw: the CLI owns parsing and reports malformed values itself
        self.count = os.environ.get("DIRTRUNCATOR_COUNT", "")

    def as_dict(self) -> dict:
        return {
            "Logging": {
                "log_level": self.log_level,
                "log_retention": self.log_retention,
                "verbose": self.verbose,
                "quiet": self.quiet,
            },
            "Truncation": {
                "command": self.command,
                "target": self.target,
                "count": self.count,
            },
        }

    # ---- logging passthrough ----
    @property
    def log_level(self) -> str:
        return self._logging.log_level

    @property
    def log_retention(self) -> int:
        return self._logging.log_retention

    @property
    def verbose(self) -> bool:
        return self._logging.verbose

    @property
    def quiet(self) -> bool:
        return self._logging.quiet


_ENV: Optional[Environment] = None


def reset_env_caches() -> None:
    """Invalidate cached views of environment variables."""
    global _ENV
    _ENV = None


def get_env() -> Environment:
    global _ENV
    if _ENV is None:
        _ENV = Environment()
    return _ENV
