# grouper/adapters/input_reader.py
"""
Input side of the CLI: turns lines of text into groups of student ids.

Interactive mode: groups close automatically at 3 students.
Batch mode: one group per blank-line separated block, any size.

Commands (both modes):
  /delete <id>   remove a student that was entered by mistake
  /next          close the current group now
  /exit          stop reading

The stop event is checked before every line. Once set, reading ends and the
groups collected so far are returned.
"""
import logging
import shlex
import threading
from typing import Callable, Iterable, List, Optional

from grouper.domain.labels import group_label
from grouper.domain.models import Group

logger = logging.getLogger(__name__)


def _silent(message: str) -> None:
    pass


class InputReader:
    def __init__(self, batch_mode: bool = False, stop: threading.Event = None,
                 echo: Callable[[str], None] = None):
        self.batch_mode = batch_mode
        self.stop = stop or threading.Event()
        self.echo = echo or _silent
        self.groups: List[Group] = []
        self.current = Group()

    # ----------------- Groups -----------------

    def add(self, student_id: str) -> None:
        if self.batch_mode:
            self.current.members.append(student_id)
        else:
            self.current.add_member(student_id)
        self.echo(f"  added: {student_id}")
        if not self.batch_mode and self.current.is_full():
            self.close_group()

    def close_group(self) -> None:
        if not self.current.members:
            return
        label = group_label(len(self.groups))
        self.groups.append(self.current)
        self.echo(f"  group {label} saved ({len(self.current)} students)")
        self.current = Group()
        if not self.batch_mode:
            self.echo(f"\n=== Group {group_label(len(self.groups))} ===")

    def delete(self, student_id: str) -> bool:
        if self.current.remove_member(student_id):
            self.echo(f"  deleted: {student_id}")
            return True
        for idx in range(len(self.groups) - 1, -1, -1):
            group = self.groups[idx]
            if group.remove_member(student_id):
                self.echo(f"  deleted: {student_id} (from group {group_label(idx)})")
                if not group.members:
                    self.groups.pop(idx)
                elif not self.batch_mode and not self.current.members:
                    # reopen so the freed seat can be filled
                    self.current = self.groups.pop(idx)
                return True
        self.echo(f"[WARN] {student_id} was not found")
        return False

    def finish(self) -> List[Group]:
        if self.current.members:
            self.groups.append(self.current)
            self.current = Group()
        return self.groups

    # ----------------- Lines -----------------

    def handle_command(self, line: str) -> bool:
        """Run a /command. Returns False when reading should stop."""
        try:
            parts = shlex.split(line)
        except ValueError as e:
            self.echo(f"[ERROR] {e}")
            return True

        if parts[0] == "/delete":
            if len(parts) < 2:
                self.echo("Usage: /delete <student_id>")
            else:
                self.delete(" ".join(parts[1:]))
        elif parts[0] == "/next":
            self.close_group()
        elif parts[0] == "/exit":
            return False
        else:
            self.echo(f"Unknown command {parts[0]}")
        return True

    def feed(self, lines: Iterable[str]) -> bool:
        """
        Read lines until they run out.

        Returns True at end of input, False when /exit was given or the
        stop event was set.
        """
        try:
            for raw in lines:
                if self.stop.is_set():
                    logger.info("Stop requested, ending input")
                    return False
                line = raw.strip()
                if not line:
                    if self.batch_mode:
                        self.close_group()
                    continue
                if line.startswith("/"):
                    if not self.handle_command(line):
                        return False
                    continue
                self.add(line)
        except KeyboardInterrupt:
            # Ctrl+C while blocked on a read
            self.stop.set()
            return False
        return not self.stop.is_set()


def read_groups(lines: Iterable[str], batch_mode: bool = False,
                stop: threading.Event = None, echo: Callable[[str], None] = None) -> List[Group]:
    reader = InputReader(batch_mode=batch_mode, stop=stop, echo=echo)
    reader.feed(lines)
    return reader.finish()


def read_interactive_rounds(open_lines: Callable[[], Iterable[str]],
                            stop: threading.Event = None,
                            echo: Optional[Callable[[str], None]] = None) -> List[Group]:
    """
    Terminal input where end-of-file (Ctrl+D) closes the current group.

    Reading starts again after every EOF that closed a group. An EOF with an
    empty current group ends input.
    """
    reader = InputReader(batch_mode=False, stop=stop, echo=echo)
    reader.echo(f"=== Group {group_label(0)} ===")
    try:
        while True:
            if not reader.feed(open_lines()):
                break
            if not reader.current.members:
                break
            reader.close_group()
    except KeyboardInterrupt:
        # Ctrl+C between two reads
        reader.stop.set()
    return reader.finish()
