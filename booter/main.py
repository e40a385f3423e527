"""Entry point for the test booter.

Builds the boot list from the built-in profile, a YAML test list or the
.booter_config file, then runs every entry in order with the sequential
runner. Prints nothing unless asked to; exits 0 once every entry has been
attempted, whatever the children's own exit statuses were.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from booter.config import DEFAULT_CONFIG_PATH, BooterConfig
from booter.execution.entries import (
    DEFAULT_PROFILE,
    PROFILES,
    TestEntry,
    entries_for_profile,
    load_test_list,
)
from booter.execution.runner import SequentialRunner, SpawnError


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Test booter - forks, execs and waits for each test binary in turn"
    )
    parser.add_argument(
        "--config-file",
        type=Path,
        default=None,
        help=f"Path to the JSON config file (default: {DEFAULT_CONFIG_PATH} if present)",
    )
    parser.add_argument(
        "--profile",
        choices=sorted(PROFILES),
        default=None,
        help=f"Built-in boot list (default: {DEFAULT_PROFILE})",
    )
    parser.add_argument(
        "--test-list",
        type=Path,
        default=None,
        help="YAML file listing test binaries to run; overrides --profile",
    )
    parser.add_argument(
        "--directory",
        type=Path,
        default=None,
        help="Directory the test binaries are resolved against "
             "(default: current working directory)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=None,
        help="Print a line to stderr as each test is spawned and reaped",
    )
    return parser.parse_args(argv)


def _load_config(config_file: Path | None) -> BooterConfig:
    if config_file is not None:
        return BooterConfig(config_file)
    if DEFAULT_CONFIG_PATH.exists():
        return BooterConfig(DEFAULT_CONFIG_PATH)
    return BooterConfig()


def resolve_entries(
    args: argparse.Namespace, config: BooterConfig
) -> tuple[TestEntry, ...]:
    """Pick the boot list: --test-list, then --profile, then the config.

    Raises:
        TestListError: If a test list file is invalid.
        ValueError: If the configured profile is unknown.
    """
    if args.test_list is not None:
        return load_test_list(args.test_list)
    if args.profile is not None:
        return entries_for_profile(args.profile)
    if config.test_list is not None:
        return load_test_list(config.test_list)
    return entries_for_profile(config.profile)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    config = _load_config(args.config_file)

    try:
        entries = resolve_entries(args, config)
        directory = args.directory if args.directory is not None else config.directory
        verbose = args.verbose if args.verbose is not None else config.verbose
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    runner = SequentialRunner(entries, directory=directory, verbose=verbose)
    try:
        outcomes = runner.run()
    except SpawnError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if verbose:
        print(f"booter: {len(outcomes)} tests run", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
