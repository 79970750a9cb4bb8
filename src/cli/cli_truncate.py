from __future__ import annotations

import argparse

from branding import DESCRIPTION, EPILOG, PROG, SYMBOLS, TRUNCATOR_HEADER
from cli.common import parse_bool_option, parse_count_option
from env import get_env
from logger import get_logger
from truncator import DirectoryTruncator, TruncationReport, TruncatorError

log = get_logger("dirtruncator.cli")


def build_truncate_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=PROG,
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Boolean modes and the count take raw strings; cli.common parses them
    # so bad values are logged instead of rejected.
    p.add_argument(
        "-t",
        "--target",
        metavar="PATH",
        help="[Mandatory] Directory to truncate. Example: -t /var/log/myapp",
    )
    p.add_argument(
        "-d",
        "--directory",
        metavar="BOOL",
        help="Specify true to truncate subdirectories. Example: -d=true",
    )
    p.add_argument(
        "-f",
        "--files",
        metavar="BOOL",
        help="Specify true to truncate files inside the target. Example: -f=true",
    )
    p.add_argument(
        "-c",
        "--count",
        metavar="N",
        help="[Mandatory] Number of newest entries to keep",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Debug output")
    p.add_argument("-q", "--quiet", action="store_true", help="No console output")
    return p


def _log_summary(report: TruncationReport) -> None:
    if not report.results:
        log.info(
            f"{SYMBOLS.SKIPPED} {report.found} {report.mode.value} in "
            f"{report.target}, limit {report.limit}: nothing to delete"
        )
        return

    symbol = SYMBOLS.OK if report.ok else SYMBOLS.WARN
    log.info(
        f"{symbol} Deleted {len(report.deleted)} of {report.excess} "
        f"{report.mode.value} from {report.target}"
    )
    for r in report.failures:
        log.info(f"  {SYMBOLS.FAIL} {r.path} ({r.outcome.value})")


def handle_truncate(args: argparse.Namespace) -> int:
    env = get_env()

    target = args.target or env.target
    count = parse_count_option(args.count if args.count is not None else env.count)
    directories = parse_bool_option("directory", args.directory)
    files = parse_bool_option("files", args.files)

    if not directories and not files:
        log.warning("Neither --directory nor --files is true; nothing to truncate")
        return 0

    if directories and files:
        log.warning("Both --directory and --files are true; truncating directories")

    log.info(TRUNCATOR_HEADER("Directory Truncator"))
    for section, values in env.as_dict().items():
        log.debug(f"{section} config: {values}")
    log.debug(f"Target: {target}")
    log.debug(f"Mode: {'directories' if directories else 'files'}")
    log.debug(f"Count: {count}")

    try:
        truncator = DirectoryTruncator(target)
        if directories:
            report = truncator.truncate_by_directory(count)
        else:
            report = truncator.truncate_by_file_count(count)
    except TruncatorError as e:
        log.error(f"There was an error trying to truncate directory: {e}")
        log.error(f"Try `{PROG} --help' for more information.")
        return 1
    except OSError as e:
        log.error(f"Could not list {target}: {e}")
        return 1

    _log_summary(report)
    return 0
