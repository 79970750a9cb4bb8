from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

from env import get_logging_env
from .console import build_console_handler
from .file import build_file_handler, repoint_file_handler
from .log_paths import command_logs_dir
from .retention import enforce_retention

# ---------------------------------------------------------------------
# State
# ---------------------------------------------------------------------

_INITIALIZED = False
_LOG_FILE_PATH: Optional[Path] = None

# Marks handlers installed by init_logging; anything else on the root
# logger (pytest capture, embedding applications) is left alone.
_OWNED = "_dirtruncator_owned"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def current_log_file() -> Optional[Path]:
    """Log file of the current run, or None before init_logging()."""
    return _LOG_FILE_PATH


def _level_to_int(level: str | int) -> int:
    if isinstance(level, int):
        return level
    lvl = logging.getLevelName(str(level).upper())
    return lvl if isinstance(lvl, int) else logging.INFO


def _ensure_run_id() -> str:
    run_id = os.environ.get("DIRTRUNCATOR_RUN_ID")
    if not run_id:
        run_id = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        os.environ["DIRTRUNCATOR_RUN_ID"] = run_id
    return run_id


def _target_logfile() -> Path:
    command = os.environ.get("DIRTRUNCATOR_COMMAND") or "truncate"
    run_id = _ensure_run_id()
    return command_logs_dir(command) / f"{command}-{run_id}.log"


def _own(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _OWNED, True)
    return handler


def _owned_handlers(root: logging.Logger) -> list[logging.Handler]:
    return [h for h in root.handlers if getattr(h, _OWNED, False)]


def init_logging() -> None:
    """
    Initialize logging for the entire process.

    - Handlers are attached ONLY to the root logger.
    - Named loggers inherit via propagation.
    - Safe to call multiple times; file handler is repointed, not stacked.
    """
    global _INITIALIZED, _LOG_FILE_PATH

    env = get_logging_env()

    root = logging.getLogger()
    logfile = _target_logfile()
    log_dir = logfile.parent

    # Base level from env, but verbose forces DEBUG everywhere.
    root_level = logging.DEBUG if env.verbose else _level_to_int(env.log_level)

    if _INITIALIZED and _LOG_FILE_PATH == logfile:
        root.setLevel(root_level)
        return

    enforce_retention(log_dir, int(env.log_retention), incoming=1)

    existing_file: logging.FileHandler | None = None
    for h in _owned_handlers(root):
        if isinstance(h, logging.FileHandler) and existing_file is None:
            existing_file = h
        root.removeHandler(h)
        if h is not existing_file:
            h.close()

    root.setLevel(root_level)

    if existing_file is not None:
        repoint_file_handler(existing_file, logfile)
        root.addHandler(existing_file)
    else:
        root.addHandler(_own(build_file_handler(logfile)))

    if not env.quiet:
        root.addHandler(_own(build_console_handler(root_level)))

    _INITIALIZED = True
    _LOG_FILE_PATH = logfile


def reset_logging() -> None:
    """Detach and close handlers installed by init_logging."""
    global _INITIALIZED, _LOG_FILE_PATH

    root = logging.getLogger()
    for h in _owned_handlers(root):
        root.removeHandler(h)
        h.close()

    _INITIALIZED = False
    _LOG_FILE_PATH = None
