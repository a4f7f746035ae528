# grouper/adapters/cli.py
"""
Command line entry point.

    grouper                 read student ids from stdin, groups of 3
    grouper --batch < file  pre-formed groups separated by blank lines

Interactive terminal:
  - one student id per line, a group closes at 3 students
  - Ctrl+D closes the current group early, Ctrl+D on an empty group finishes
  - Ctrl+C stops input and prints the groups entered so far
"""
import argparse
import logging
import random
import signal
import sys
import threading
from contextlib import contextmanager
from typing import List, Optional

from grouper.adapters.input_reader import read_groups, read_interactive_rounds
from grouper.config.settings import settings
from grouper.domain.labels import group_label
from grouper.domain.models import Partition
from grouper.services.grouping_service import GroupingService

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="grouper",
        description="Split students into groups of 3 (at least 2 per group).",
    )
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--batch", action="store_const", const="batch", dest="mode",
                      help="Blank-line separated groups, no random regrouping.")
    mode.add_argument("--interactive", action="store_const", const="interactive", dest="mode",
                      help="Groups of 3 as ids are entered, leftovers regrouped at random.")
    p.add_argument("--seed", type=int, default=None, help="Random seed for interactive regrouping.")
    p.add_argument("--log-level", default=None, help="Logging level (default from settings).")
    return p


def resolve_batch_mode(mode: Optional[str], stdin_is_tty: bool) -> bool:
    mode = mode or settings.DEFAULT_MODE
    if mode == "auto":
        return not stdin_is_tty
    return mode == "batch"


@contextmanager
def interrupt_handler(stop: threading.Event):
    """Ctrl+C sets the stop event while input is read. The old handler is put back afterwards."""
    def _handler(signum, frame):
        print("\n\nCtrl+C pressed, finishing with the groups entered so far...")
        stop.set()
        # break out of a blocking read
        raise KeyboardInterrupt

    previous = signal.signal(signal.SIGINT, _handler)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def print_partition(partition: Partition, out=None) -> None:
    out = out or sys.stdout
    if partition.warning:
        print(f"[WARN] {partition.warning}", file=out)
    if not partition.groups:
        return
    print("\n=== Groups ===", file=out)
    for i, group in enumerate(partition.groups):
        print(f"Group {group_label(i)}: {len(group)} members", file=out)
        for member in group.members:
            print(f"  - {member}", file=out)
    print(f"\nTotal: {len(partition.groups)} groups, {partition.member_count} members", file=out)


def print_usage() -> None:
    print("Enter student ids, one per line (groups of 3):")
    print("  - Ctrl+D: close the current group and start the next one")
    print("  - Ctrl+C: stop and show the groups")
    print("  - /delete <id>: remove a student, /next: close group, /exit: finish")
    print()


def main(argv: List[str] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=(args.log_level or settings.LOG_LEVEL).upper())

    batch_mode = resolve_batch_mode(args.mode, sys.stdin.isatty())
    stop = threading.Event()
    with interrupt_handler(stop):
        if batch_mode:
            groups = read_groups(sys.stdin, batch_mode=True, stop=stop)
        else:
            print_usage()
            groups = read_interactive_rounds(lambda: sys.stdin, stop=stop, echo=print)

    if not any(len(g) for g in groups):
        print("\nNo input was provided.")
        return 0

    rng = random.Random(args.seed) if args.seed is not None else None
    service = GroupingService(settings, rng=rng)
    partition = service.reorganize(groups, batch_mode=batch_mode)
    print_partition(partition)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
