"""
Fixture generation driver.

Writes one file per catalog case into a fixture directory, skipping names
that already exist, so repeated runs only fill in what is missing. Created
names are reported on stderr; printed checks go to stdout as name=value.
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import Iterable, Optional, TextIO

from .catalog import CASES, CHECKS, Case, Check
from .errors import FixtureError, FixtureWriteError
from .oracle import LEGACY, Oracle

DEFAULT_DIRECTORY = "cases"


def _write_fixture(path: str, data: bytes) -> bool:
    """Create path exclusively and write data; False if it already exists."""
    try:
        with open(path, "xb") as f:
            f.write(data)
    except FileExistsError:
        return False
    except OSError as e:
        raise FixtureWriteError(path, e.strerror or str(e)) from e
    return True


def generate(
    directory: str,
    cases: Iterable[Case] = CASES,
    oracle: Oracle = LEGACY,
    progress: Optional[TextIO] = None,
) -> list[str]:
    """
    Persist every missing case of the catalog.

    Args:
        directory: Fixture directory; created if missing.
        cases: Cases to run, in order.
        oracle: Arithmetic engine the cases are computed with.
        progress: Stream for " name" progress tokens (stderr by default).

    Returns:
        Names of the fixtures created by this call, in catalog order.

    Raises:
        FixtureWriteError: a fixture could not be written.
        KeyDecodeError: a fixed test key did not unpack.
    """
    if progress is None:
        progress = sys.stderr
    try:
        os.makedirs(directory, exist_ok=True)
    except OSError as e:
        raise FixtureWriteError(directory, e.strerror or str(e)) from e

    created = []
    for case in cases:
        path = os.path.join(directory, case.name)
        if os.path.exists(path):
            continue
        if _write_fixture(path, case.run(oracle)):
            created.append(case.name)
            print(f" {case.name}", end="", file=progress, flush=True)
    return created


def run_checks(
    checks: Iterable[Check] = CHECKS,
    oracle: Oracle = LEGACY,
    out: Optional[TextIO] = None,
) -> dict[str, int]:
    """Evaluate and print every check as " name=value"; returns the values."""
    if out is None:
        out = sys.stdout
    results = {}
    for check in checks:
        value = int(check.evaluate(oracle))
        results[check.name] = value
        print(f" {check.name}={value}", end="", file=out)
    return results


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="uecc-fixtures",
        description="Generate byte-exact libuecc arithmetic fixtures.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=DEFAULT_DIRECTORY,
        help=f"fixture directory (default: {DEFAULT_DIRECTORY})",
    )
    parser.add_argument(
        "--list", action="store_true", help="print the catalog names and exit"
    )
    args = parser.parse_args(argv)

    if args.list:
        for case in CASES:
            print(case.name)
        return 0

    print("generating... ")
    try:
        generate(args.directory)
    except FixtureError as e:
        print(file=sys.stderr)
        print(f"error: {e}", file=sys.stderr)
        return 1
    run_checks()
    print("\ndone.")
    return 0


__all__: tuple[str, ...] = ("DEFAULT_DIRECTORY", "generate", "main", "run_checks")
