"""
dirtruncator CLI package.

Argparse wiring and handlers for the truncate command:
- build_*_parser()
- handle_*(args) -> int

No side effects or imports should occur at package import time.
"""
from __future__ import annotations

__all__ = [
    "common",
    "cli_truncate",
]
