"""
Command-line front end.

Usage:
    dupfinder PATH                # Report duplicate sets
    dupfinder PATH --fix          # Report, then ask which copy to keep
    dupfinder PATH --fix --trash  # Same, deleted copies go to the recycle bin

Exit code 0 on success (also when nothing is duplicated), 1 on a scan error.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

import structlog

from dupfinder import __version__
from dupfinder.config.logging import configure_logging
from dupfinder.config.settings import get_settings
from dupfinder.deleter import FileDeleter
from dupfinder.exceptions import DupFinderError
from dupfinder.models import ScanConfig, ScanStats
from dupfinder.reporter import DuplicateReporter, printable
from dupfinder.resolver import Resolver
from dupfinder.scanner import DuplicateScanner

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dupfinder",
        description="Find files with identical content in a directory tree.",
    )
    parser.add_argument("target_path", type=Path, help="Path of the directory to scan")
    parser.add_argument(
        "-f",
        "--fix",
        dest="do_fix",
        action="store_true",
        help="Fix duplicates by selecting one file to keep",
    )
    parser.add_argument(
        "--trash",
        action="store_true",
        default=None,
        help="Send deleted duplicates to the recycle bin instead of removing them",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Log level (default: DUPFINDER_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def log_progress(stats: ScanStats) -> None:
    logger.info(
        "dupfinder_scan_progress",
        files_hashed=stats.files_hashed,
        bytes_hashed=stats.bytes_hashed,
        current_directory=stats.current_directory,
    )


def run(
    target_dir: Path,
    do_fix: bool,
    use_trash: bool = False,
    progress_interval: int = 100,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """
    Scan, report and (in fix mode) resolve each duplicate set.

    Returns:
        Number of duplicate sets found

    Raises:
        ScanError: The tree could not be fully scanned
    """
    config = ScanConfig(root_path=target_dir, progress_interval=progress_interval)
    index = DuplicateScanner(config, progress_callback=log_progress).scan()

    after_set = None
    if do_fix:
        deleter = FileDeleter(use_trash=use_trash, stdout=stdout, stderr=stderr)
        after_set = Resolver(stdin=stdin, stdout=stdout, stderr=stderr, deleter=deleter).resolve

    return len(DuplicateReporter(out=stdout).report(index, after_set=after_set))


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    args = build_parser().parse_args(argv)
    settings = get_settings()

    configure_logging(
        level=args.log_level or settings.log_level,
        json_format=settings.log_format == "json",
        enable_colors=settings.log_colors,
    )
    use_trash = settings.use_trash if args.trash is None else args.trash

    print(f'Scanning directory "{printable(args.target_path)}" for duplicates...', file=stdout)
    try:
        found = run(
            args.target_path,
            args.do_fix,
            use_trash=use_trash,
            progress_interval=settings.progress_interval,
            stdin=stdin,
            stdout=stdout,
            stderr=stderr,
        )
    except DupFinderError as e:
        logger.info("dupfinder_scan_failed", error=str(e))
        print(f"Error while scanning: {printable(str(e))}", file=stderr)
        return 1

    logger.info("dupfinder_run_completed", duplicate_sets=found, fix=args.do_fix)
    return 0
