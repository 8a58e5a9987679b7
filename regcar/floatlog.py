"""Append single-precision floats to a binary file."""

from __future__ import annotations

import argparse
import os
import struct
import sys
from typing import Optional, Sequence

_FLOAT = struct.Struct("<f")
FLOAT_SIZE = _FLOAT.size


def append_float(path: str | os.PathLike[str], value: float) -> None:
    """Append ``value`` as a 4-byte little-endian float, creating the file if needed."""
    with open(path, "ab") as handle:
        handle.write(_FLOAT.pack(value))


def read_floats(path: str | os.PathLike[str]) -> list[float]:
    """Every complete float stored in the file, in order."""
    with open(path, "rb") as handle:
        data = handle.read()
    usable = len(data) - len(data) % FLOAT_SIZE
    return [value for (value,) in _FLOAT.iter_unpack(data[:usable])]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Create the named file if missing; otherwise append one value to it."""
    parser = argparse.ArgumentParser(description="Append a float to a binary file.")
    parser.add_argument("path", nargs="?", help="file to write")
    parser.add_argument("value", nargs="?", type=float, help="value to append")
    args = parser.parse_args(argv)

    path = args.path if args.path is not None else input("File name: ").strip()
    if not os.path.exists(path):
        print("File does not exist, creating it!")
        try:
            open(path, "wb").close()
        except OSError:
            print("Error creating the file!")
            return 1
        print("File created.")
        return 0

    print("File opened.")
    value = args.value
    if value is None:
        try:
            value = float(input("Value to save: ").strip())
        except ValueError:
            print("Error saving the record!")
            return 1
    try:
        append_float(path, value)
    except OSError:
        print("Error saving the record!")
        return 1
    print("Record saved.")
    return 0


if __name__ == "__main__":
    sys.exit(main())