from __future__ import annotations

"""bootstrap.py

Process bootstrap for dirtruncator.

This module is intentionally tiny and side-effectful.

Rules:
1) Only bootstrap is allowed to *mutate* os.environ for shared run context.
2) Call bootstrap_base_env() exactly once at the true entrypoint.
3) Call bootstrap_run_context() after argparse parsing, before init_logging().

Everything else should treat environment variables as the source of truth.
"""

import os
from datetime import datetime

from dotenv import load_dotenv

from env import ConfigError, config_dir, reset_env_caches


_BOOTSTRAPPED = False


def bootstrap_base_env(*, env_file: str = ".env", required: bool = False) -> None:
    global _BOOTSTRAPPED
    if _BOOTSTRAPPED:
        return

    dotenv_path = config_dir() / env_file

    if dotenv_path.exists():
        # Never override variables the scheduler already exported
        load_dotenv(dotenv_path, override=False)
    elif required:
        raise ConfigError(
            f"Missing required env file: {dotenv_path}\n"
            "Expected config/.env under DIRTRUNCATOR_HOME or the working directory."
        )

    os.environ.setdefault(
        "DIRTRUNCATOR_RUN_ID",
        datetime.now().strftime("%Y-%m-%d_%H-%M-%S"),
    )

    reset_env_caches()
    _BOOTSTRAPPED = True


def bootstrap_run_context(
    *,
    command: str,
    verbose: bool | None = None,
    quiet: bool | None = None,
) -> None:
    """Establish run-scoped context used by logging."""

    os.environ["DIRTRUNCATOR_COMMAND"] = command

    if verbose is not None:
        os.environ["DIRTRUNCATOR_VERBOSE"] = "1" if verbose else "0"
    if quiet is not None:
        os.environ["DIRTRUNCATOR_QUIET"] = "1" if quiet else "0"

    # Context changes must invalidate cached env views.
    reset_env_caches()
