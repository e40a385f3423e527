"""Test execution: boot lists and the sequential fork/exec runner."""

from booter.execution.entries import TestEntry, TestListError, entries_for_profile, load_test_list
from booter.execution.runner import ChildOutcome, SequentialRunner, SpawnError

__all__ = [
    "ChildOutcome",
    "SequentialRunner",
    "SpawnError",
    "TestEntry",
    "TestListError",
    "entries_for_profile",
    "load_test_list",
]
