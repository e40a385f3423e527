"""Boot lists: the test entries the runner launches, in order.

A boot list is an immutable tuple of TestEntry objects. Two lists are
built in (the ``usertests`` syscall suite and the interactive ``shell``
boot), and a list can also be read from a YAML file holding either a
bare list of names or a mapping with a ``tests`` key.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

import yaml


class TestListError(ValueError):
    """Raised when a test list file cannot be read or has the wrong shape."""

    __test__ = False


@dataclass(frozen=True)
class TestEntry:
    """A named executable to launch, plus any arguments after its name.

    With ``clean_env`` set the executable starts with an empty
    environment instead of inheriting the booter's.
    """

    __test__ = False

    name: str
    args: tuple[str, ...] = ()
    clean_env: bool = False

    @property
    def argv(self) -> list[str]:
        """Argument vector handed to exec: program name first."""
        return [self.name, *self.args]


# Syscall test binaries, in execution order.
USERTESTS: tuple[str, ...] = (
    "brk", "chdir", "clone", "close", "dup", "dup2",
    "execve", "exit", "fork", "fstat", "getcwd", "getdents",
    "getpid", "getppid", "gettimeofday", "mkdir_", "mmap", "mount",
    "munmap", "open", "openat", "pipe", "read", "sleep",
    "test_echo", "times", "umount", "uname", "unlink", "wait",
    "waitpid", "write", "yield",
)

SHELL_ENTRY = TestEntry(name="./busybox", args=("sh",), clean_env=True)

PROFILES: dict[str, tuple[TestEntry, ...]] = {
    "usertests": tuple(TestEntry(name) for name in USERTESTS),
    "shell": (SHELL_ENTRY,),
}

DEFAULT_PROFILE = "usertests"


def entries_from_names(names: Iterable[str]) -> tuple[TestEntry, ...]:
    """Build an argument-less boot list from executable names."""
    return tuple(TestEntry(name) for name in names)


def entries_for_profile(profile: str) -> tuple[TestEntry, ...]:
    """Look up a built-in boot list.

    Raises:
        ValueError: If the profile is not known.
    """
    try:
        return PROFILES[profile]
    except KeyError:
        known = ", ".join(sorted(PROFILES))
        raise ValueError(f"Unknown profile: {profile} (known: {known})")


def _extract_names(data: Any, path: Path) -> list[str]:
    if isinstance(data, dict):
        if "tests" not in data:
            raise TestListError(f"{path}: mapping has no 'tests' key")
        data = data["tests"]
    if not isinstance(data, list):
        raise TestListError(f"{path}: expected a list of test names")

    names: list[str] = []
    for index, item in enumerate(data):
        if not isinstance(item, str) or not item.strip():
            raise TestListError(
                f"{path}: entry {index} is not a non-empty string: {item!r}"
            )
        names.append(item.strip())
    return names


def load_test_list(path: Path) -> tuple[TestEntry, ...]:
    """Read a boot list from a YAML file.

    Accepted shapes::

        - brk
        - chdir

    or::

        tests:
          - brk
          - chdir

    Args:
        path: Path to the YAML file.

    Returns:
        Tuple of TestEntry objects in file order.

    Raises:
        TestListError: If the file is missing, is not valid YAML, or does
            not hold a list of non-empty strings.
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise TestListError(f"Cannot read test list {path}: {e}")
    except yaml.YAMLError as e:
        raise TestListError(f"Invalid YAML in test list {path}: {e}")

    return entries_from_names(_extract_names(data, path))
