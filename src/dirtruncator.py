#!/usr/bin/env python3
from __future__ import annotations

from typing import Optional, Sequence

from bootstrap import bootstrap_base_env, bootstrap_run_context


def main(argv: Optional[Sequence[str]] = None) -> int:
    # Load .env and base environment early
    bootstrap_base_env(env_file=".env", required=False)

    # Keep imports inside main to avoid early side effects.
    from cli.cli_truncate import build_truncate_parser, handle_truncate

    parser = build_truncate_parser()
    args = parser.parse_args(argv)

    # Only explicit flags override values coming from .env
    bootstrap_run_context(
        command="truncate",
        verbose=True if args.verbose else None,
        quiet=True if args.quiet else None,
    )

    # Initialize logging AFTER run-context env stamping
    from logger import init_logging, get_logger

    init_logging()

    log = get_logger(__name__)
    log.debug("dirtruncator starting")

    return handle_truncate(args)


if __name__ == "__main__":
    raise SystemExit(main())
