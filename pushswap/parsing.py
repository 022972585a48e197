"""Reading the command line: option flags and the integers to sort."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Literal

INT_MIN = -2147483648
INT_MAX = 2147483647

_DIGITS = frozenset("0123456789")
_LEADING_INT = re.compile(r"[\t\n\x0b\x0c\r ]*([+-]?)([0-9]*)")

WordKind = Literal["number", "list", "invalid"]


class ParseError(ValueError):
    """The arguments do not describe a valid set of integers."""


class Mode(Enum):
    """The sorting strategy chosen on the command line."""

    SIMPLE = 1
    MEDIUM = 2
    COMPLEX = 3
    ADAPTIVE = 4


_FLAGS = {
    "--simple": Mode.SIMPLE,
    "--medium": Mode.MEDIUM,
    "--complex": Mode.COMPLEX,
    "--adaptive": Mode.ADAPTIVE,
}


@dataclass
class Config:
    """Everything the arguments ask for."""

    values: list[int] = field(default_factory=list)
    mode: Mode = Mode.ADAPTIVE
    bench: bool = False


def mode_from_flag(arg: str) -> Mode | None:
    """The mode a strategy flag names, or None if ``arg`` is not one."""
    return _FLAGS.get(arg)


def classify_word(word: str) -> WordKind:
    """Whether ``word`` is one number, a space-separated list, or invalid.

    Only digits, spaces, and a sign directly before a digit are allowed.
    """
    has_space = False
    for char, following in zip(word, word[1:] + "\0"):
        if char in _DIGITS:
            continue
        if char == " ":
            has_space = True
        elif char in "+-" and following in _DIGITS:
            continue
        else:
            return "invalid"
    return "list" if has_space else "number"


def parse_int(text: str) -> int:
    """Read a leading integer the way atoi does and check it fits in 32 bits."""
    match = _LEADING_INT.match(text)
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    if not INT_MIN <= value <= INT_MAX:
        raise ParseError(f"integer out of range: {text!r}")
    return value


def parse_args(args: Iterable[str]) -> Config:
    """Build a Config from the arguments that follow the program name."""
    config = Config()
    seen: set[int] = set()

    def insert(word: str) -> None:
        value = parse_int(word)
        if value in seen:
            raise ParseError(f"duplicate value: {value}")
        seen.add(value)
        config.values.append(value)

    for place, arg in enumerate(args, start=1):
        flag = mode_from_flag(arg)
        if flag is not None and place <= 2:
            config.mode = flag
        elif arg == "--bench" and place == 1:
            config.bench = True
        else:
            kind = classify_word(arg)
            if kind == "number":
                insert(arg)
            elif kind == "list":
                for word in arg.split(" "):
                    if word:
                        insert(word)
            else:
                raise ParseError(f"invalid argument: {arg!r}")
    return config