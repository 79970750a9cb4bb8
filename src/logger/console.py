from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from env import get_logging_env

# Console used by RichHandler (stderr keeps stdout clean for schedulers).
# stderr=True looks up sys.stderr on every write.
UI_CONSOLE = Console(
    stderr=True,
    soft_wrap=True,
)


class ConsoleGateFilter(logging.Filter):
    """
    Drop console output when quiet mode is enabled.

    The flag is re-read per record so a quiet toggle takes effect without
    rebuilding handlers.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        return not get_logging_env().quiet


def build_console_handler(level: int = logging.INFO) -> logging.Handler:
    handler = RichHandler(
        console=UI_CONSOLE,
        level=level,
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
    )

    # RichHandler renders the level column itself.
    handler.setFormatter(logging.Formatter("%(message)s"))

    handler.addFilter(ConsoleGateFilter())
    return handler
