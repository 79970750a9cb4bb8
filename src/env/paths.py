from __future__ import annotations

import os
from pathlib import Path

# ---------------------------------------------------------------------
# Base directories (override-friendly)
# ---------------------------------------------------------------------
#
# Everything resolves per call from the environment or the working
# directory, never from where the package is installed.


def _resolve_dir(env_var: str, default: Path) -> Path:
    """
    Resolve a directory path from an environment variable or default.
    """
    raw = os.environ.get(env_var)
    return Path(raw).expanduser().resolve() if raw else default


def home_dir() -> Path:
    """Base for config/ and logs/: DIRTRUNCATOR_HOME, else the working directory."""
    return _resolve_dir("DIRTRUNCATOR_HOME", Path.cwd().resolve())


def config_dir() -> Path:
    """Where bootstrap looks for .env. Not created if missing."""
    return home_dir() / "config"


def logs_dir() -> Path:
    """
    Root of the tool's own log files. Created on demand.

    Re-read on every call so DIRTRUNCATOR_LOGS_DIR can change between runs
    (and between tests).
    """
    path = _resolve_dir("DIRTRUNCATOR_LOGS_DIR", home_dir() / "logs")
    path.mkdir(parents=True, exist_ok=True)
    return path
