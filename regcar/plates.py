"""Licence-plate format checks and interactive plate input."""

from __future__ import annotations

from typing import Callable

PLATE_PROMPT = "Enter a string in the format ABC-0123: "
INVALID_MESSAGE = "Invalid format. Please enter again.\n"

_LETTERS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_DIGITS = frozenset("0123456789")


def is_valid_plate(text: str) -> bool:
    """True if ``text`` is three capital letters, a hyphen and four digits."""
    if len(text) != 8:
        return False
    letters, hyphen, digits = text[:3], text[3], text[4:]
    return (
        all(ch in _LETTERS for ch in letters)
        and hyphen == "-"
        and all(ch in _DIGITS for ch in digits)
    )


def normalize_plate(text: str) -> str:
    """Cut ``text`` at its first newline and upper-case it."""
    line, _, _ = text.partition("\n")
    return line.upper()


def prompt_plate(read: Callable[[], str], write: Callable[[str], object]) -> str:
    """Ask for a plate until a valid one is given, and return it.

    ``read`` returns one line of input and raises EOFError when input ends;
    ``write`` receives the prompts and error messages.
    """
    while True:
        write(PLATE_PROMPT)
        plate = normalize_plate(read())
        if is_valid_plate(plate):
            return plate
        write(INVALID_MESSAGE)