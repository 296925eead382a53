"""Demonstration run: store a few edge-case records and list them back."""

from __future__ import annotations

import argparse
import sys
import tempfile
from typing import TextIO

from .encoding import show_records, write_records

CASES = (
    ("Test 1", [(-16777216,)], "i"),
    ("Test 2", [(0,)], "u"),
    ("Test 3", [("X" * 63,)], "s64"),
    ("Test 4", [(-1, 258)], "iu"),
    ("Test 5", [(1, "a"), (2, "b"), (3, "c")], "is02"),
)


def run_case(title, records, descriptor, out: TextIO):
    """Write records to a temporary file, then list them to ``out``."""
    out.write(f"\n=== {title} ===\n")
    with tempfile.TemporaryFile() as handle:
        write_records(records, descriptor, handle)
        handle.seek(0)
        show_records(handle, out)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="compactstore-demo",
        description="Store edge-case records in compact form and list them.",
    )
    parser.parse_args(argv)
    try:
        for title, records, descriptor in CASES:
            run_case(title, records, descriptor, sys.stdout)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())