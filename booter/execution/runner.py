"""Sequential fork/exec/wait runner.

Each entry gets its own child process, which replaces itself with the
entry's executable. The parent blocks on that child before moving on, so
at most one child is outstanding at any time. A child's exit status is
collected but never changes what runs next; only a failed fork stops the
run.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from booter.execution.entries import TestEntry

# Status a child exits with when exec fails (shell "command not found").
EXEC_FAILURE_STATUS = 127


class SpawnError(RuntimeError):
    """Raised when a child process cannot be created. Fatal to the run."""

    def __init__(self, entry: TestEntry, cause: OSError) -> None:
        super().__init__(f"fork failed for {entry.name}: {cause}")
        self.entry = entry
        self.cause = cause


@dataclass
class ChildOutcome:
    """Reaped child of one entry."""

    name: str
    pid: int
    exit_code: int  # negative signal number if the child was killed


class SequentialRunner:
    """Runs a boot list one child at a time, in list order."""

    def __init__(
        self,
        entries: Sequence[TestEntry],
        directory: Path | None = None,
        verbose: bool = False,
    ) -> None:
        self.entries = tuple(entries)
        self.directory = directory
        self.verbose = verbose
        self.outcomes: list[ChildOutcome] = []

    def executable_path(self, entry: TestEntry) -> str:
        """Path handed to exec for an entry.

        Without a base directory the name is used as-is, so a bare name is
        resolved against the current working directory.
        """
        if self.directory is None:
            return entry.name
        return os.path.join(self.directory, entry.name)

    def run(self) -> list[ChildOutcome]:
        """Spawn and reap every entry in order.

        Returns:
            One ChildOutcome per entry, in execution order.

        Raises:
            SpawnError: If a fork fails. Later entries are not attempted.
        """
        self.outcomes = []
        for entry in self.entries:
            self.outcomes.append(self._run_entry(entry))
        return self.outcomes

    def _run_entry(self, entry: TestEntry) -> ChildOutcome:
        path = self.executable_path(entry)
        if self.verbose:
            print(f"booter: spawning {entry.name}", file=sys.stderr)

        # Pending buffered output would otherwise be written twice.
        sys.stdout.flush()
        sys.stderr.flush()

        try:
            pid = os.fork()
        except OSError as e:
            raise SpawnError(entry, e) from e

        if pid == 0:
            self._exec_child(path, entry)

        _, status = os.waitpid(pid, 0)
        outcome = ChildOutcome(
            name=entry.name,
            pid=pid,
            exit_code=os.waitstatus_to_exitcode(status),
        )
        if self.verbose:
            print(
                f"booter: {entry.name} (pid {pid}) exited with {outcome.exit_code}",
                file=sys.stderr,
            )
        return outcome

    @staticmethod
    def _exec_child(path: str, entry: TestEntry) -> None:
        """Replace the child's image; never returns."""
        try:
            if entry.clean_env:
                os.execve(path, entry.argv, {})
            else:
                os.execv(path, entry.argv)
        finally:
            os._exit(EXEC_FAILURE_STATUS)
