from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

# Leading numeric prefix after surrounding whitespace, e.g. "100k" -> "100", " 2.5e3 " -> "2.5e3"
_NUMBER_PREFIX = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INT_PREFIX = re.compile(r"[+-]?[0-9]+")


def parse_leading_number(raw: str | None) -> Decimal | None:
    """Reads the leading number of the input; None if it does not start with one."""
    if raw is None:
        return None
    match = _NUMBER_PREFIX.match(raw.strip())
    if match is None:
        return None
    try:
        return Decimal(match.group())
    except InvalidOperation:
        return None


def parse_leading_int(raw: str | None) -> int | None:
    """
    Reads the leading integer of the input ("12" -> 12, "3.7" -> 3, "x1" -> None).
    Digit runs beyond the interpreter's int conversion limit count as not a number.
    """
    if raw is None:
        return None
    match = _INT_PREFIX.match(raw.strip())
    if match is None:
        return None
    try:
        return int(match.group())
    except ValueError:
        return None
