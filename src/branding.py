from __future__ import annotations

DEFAULT_WIDTH = 60


# --------------------------------------------------
# Help text
# --------------------------------------------------

PROG = "dirtruncator"

DESCRIPTION = """\
Directory Truncator

Trims a given directory to a set number of files or subdirectories based on
their creation time. Older entries are deleted first.
"""

EPILOG = """\
examples:
  dirtruncator -t /var/log/myapp -f=true -c 30
  dirtruncator --target=/srv/builds --directory=true --count=5
"""


# --------------------------------------------------
# Headers / sections
# --------------------------------------------------


def TRUNCATOR_HEADER(
    title: str,
    *,
    width: int = DEFAULT_WIDTH,
    pad: int = 4,
) -> str:
    title = title.strip()
    inner = max(width - 2, len(title) + pad * 2)

    top = f"╔{'═' * inner}╗"
    mid = f"║{title.center(inner)}║"
    bot = f"╚{'═' * inner}╝"

    return f"{top}\n{mid}\n{bot}"


class SYMBOLS:
    OK = "✔"
    FAIL = "✖"
    WARN = "⚠"
    SKIPPED = "⤼"
