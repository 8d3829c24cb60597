"""Coercion rules used by the typed getters."""

from __future__ import annotations

import re
from typing import Any, Optional, Tuple

from .types import TypeTag

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FALSE_STRINGS = {"0", "false"}


def parse_int(text: str) -> Optional[int]:
    """Parse a base-10 integer with an optional sign, or return None."""
    if not _INT_PATTERN.fullmatch(text):
        return None
    return int(text)


def as_bool(tag: TypeTag, value: Any) -> Tuple[bool, bool]:
    if tag == TypeTag.BOOL:
        return bool(value), True
    if tag == TypeTag.INT:
        return int.__int__(value) != 0, True
    if tag == TypeTag.STRING:
        return str.lower(value) not in _FALSE_STRINGS, True
    return False, False


def as_int(tag: TypeTag, value: Any) -> Tuple[int, bool]:
    # int and str subclasses come back as plain builtins
    if tag == TypeTag.INT:
        return int.__int__(value), True
    if tag == TypeTag.BOOL:
        return (1 if value else 0), True
    if tag == TypeTag.STRING:
        parsed = parse_int(str.__str__(value))
        if parsed is None:
            return 0, False
        return parsed, True
    return 0, False


def as_string(tag: TypeTag, value: Any) -> Tuple[str, bool]:
    if tag == TypeTag.STRING:
        return str.__str__(value), True
    if tag == TypeTag.BOOL:
        return ("true" if value else "false"), True
    if tag == TypeTag.INT:
        return int.__repr__(value), True
    return "", False
