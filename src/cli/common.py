from __future__ import annotations

from typing import Optional

from logger import get_logger

log = get_logger("dirtruncator.cli")


# ----------------------------
# Option value parsing
# ----------------------------
#
# Values are parsed here rather than via argparse `type=` so that a bad
# value is logged and defaulted instead of aborting the run.


def parse_bool_option(name: str, raw: Optional[str]) -> bool:
    """
    Parse a `true`/`false` option value (case-insensitive).

    Missing values are False; anything else is logged and treated as False.
    """
    if raw is None:
        return False

    value = raw.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False

    log.error(f"--{name} needs to be true or false, not {raw!r}")
    return False


def parse_count_option(raw: Optional[str], default: int = 0) -> int:
    """Parse the retention count; a malformed value is logged and defaults."""
    if raw is None or not raw.strip():
        return default

    try:
        return int(raw.strip())
    except ValueError:
        log.error(f"Count needs to be a number (int), not {raw!r}")
        return default
