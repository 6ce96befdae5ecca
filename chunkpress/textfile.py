"""Write, append to and read back a small text file."""

from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional, Sequence, Union

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_FILENAME = "sample.txt"
INITIAL_LINES = ("This is the first line.", "This is the second line.")
APPENDED_LINE = "This is an appended line."


def write_lines(path: PathLike) -> None:
    """Create or truncate *path* and write the initial lines to it."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(f"{line}\n" for line in INITIAL_LINES)


def append_line(path: PathLike) -> None:
    """Append the extra line to the end of *path*."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(f"{APPENDED_LINE}\n")


def read_lines(path: PathLike) -> List[str]:
    """Return the lines of *path* without their line terminators."""
    with open(path, encoding="utf-8") as handle:
        return [line[:-1] if line.endswith("\n") else line for line in handle]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Write, append and print the file named on the command line."""
    parser = argparse.ArgumentParser(description="Write, append and read a text file.")
    parser.add_argument("filename", nargs="?", default=DEFAULT_FILENAME)
    args = parser.parse_args(argv)
    path = args.filename

    try:
        write_lines(path)
    except OSError:
        print("Error opening file for writing!", file=sys.stderr)
    else:
        print("Data written to file successfully.")

    try:
        append_line(path)
    except OSError:
        print("Error opening file for appending!", file=sys.stderr)
    else:
        print("Data appended to file successfully.")

    try:
        lines = read_lines(path)
    except OSError:
        print("Error opening file for reading!", file=sys.stderr)
    else:
        print("\nContents of the file:")
        for line in lines:
            print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())