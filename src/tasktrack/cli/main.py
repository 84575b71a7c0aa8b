# src/tasktrack/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs exactly one command:
delete > list > remove > create (the default).
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from .. import __version__
from ..cli.bootstrap import create_initial_state
from ..cli.commands import registry, select_command
from ..config import get_settings
from ..logging_setup import setup_logging
from ..tasks.task_models import DEFAULT_DEADLINE, DEFAULT_PRIORITY

logger = logging.getLogger(__name__)


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {raw!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tasktrack",
        description="Create tasks, give them a deadline and a priority, then complete them.",
        epilog=registry.build_help(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-n", "--name", help="Name of the task.")
    parser.add_argument(
        "--deadline", default=DEFAULT_DEADLINE, help="Task deadline (default: %(default)s)."
    )
    parser.add_argument(
        "--priority", default=DEFAULT_PRIORITY, help="Task priority (default: %(default)s)."
    )
    parser.add_argument(
        "-c",
        "--count",
        type=_positive_int,
        default=1,
        help="Number of times to create the task (default: %(default)s).",
    )
    parser.add_argument("--all", action="store_true", help="Print all tasks.")
    parser.add_argument(
        "--remove",
        type=_non_negative_int,
        metavar="INDEX",
        help="Index of the task to remove from the list.",
    )
    parser.add_argument("-d", "--delete", metavar="FILE", help="Delete FILE (e.g. tasks.json).")
    parser.add_argument(
        "-f",
        "--file",
        dest="store_path",
        metavar="PATH",
        help="Task store for create/list/remove (default: $TASKTRACK_STORE_PATH or tasks.json).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None, *, settings=None) -> int:
    if settings is None:
        settings = get_settings()

    console_level = getattr(logging, str(settings.log_level).upper(), logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING
    setup_logging(console_level=console_level, log_file=getattr(settings, "log_file", None))

    args = build_parser().parse_args(argv)

    state = create_initial_state(settings=settings, store_path=args.store_path)

    command = select_command(args)
    logger.info("%s: running %s against %s", settings.app_name, command, state.task_store.path)
    return registry.handle(state, command, args)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
