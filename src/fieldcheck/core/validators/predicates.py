"""
Value predicates used by the built-in checks.

Each predicate takes the raw value under test and answers one question about
it. No coercion is performed on behalf of the caller; parsing is only used
to decide whether a value is acceptable.
"""

import math
import numbers
import re
from collections.abc import Mapping, Sized
from typing import Any

from .patterns import is_email

_INT_RE = re.compile(r"[+-]?(?:0|[1-9][0-9]*)")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
FALSE_STRINGS = frozenset({"0", "false", "no", "off"})


def is_container(value: Any) -> bool:
    """True for collections (anything sized that is not text)."""
    return isinstance(value, Sized) and not isinstance(value, (str, bytes))


def is_empty(value: Any) -> bool:
    """
    Decide emptiness explicitly.

    Empty means: None, "", numeric zero (including False), or a collection
    with no items. Whitespace-only strings are not empty.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, numbers.Number):
        return value == 0
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def is_blank(value: Any) -> bool:
    """None or "" (the values pattern checks let through)."""
    return value is None or value == ""


def as_text(value: Any) -> str | None:
    """
    Text form of a scalar value.

    Returns:
        None for containers, which have no text form
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else ""
    if is_container(value):
        return None
    return str(value)


def as_number(value: Any) -> int | float | None:
    """Finite numeric value of an int, float or numeric string; None otherwise."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip()
        if _INT_RE.fullmatch(text):
            return int(text)
        if _FLOAT_RE.fullmatch(text):
            number = float(text)
            return number if math.isfinite(number) else None
    return None


def is_int(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, str):
        return _INT_RE.fullmatch(value.strip()) is not None
    return False


def is_float(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, str):
        text = value.strip()
        # "1e999" is well-formed but overflows to inf
        return _FLOAT_RE.fullmatch(text) is not None and math.isfinite(float(text))
    return False


def is_bool(value: Any) -> bool:
    """Accept True/False, 0/1 and the usual textual spellings."""
    if isinstance(value, bool):
        return True
    if isinstance(value, int):
        return value in (0, 1)
    if isinstance(value, str):
        text = value.strip().lower()
        return text in TRUE_STRINGS or text in FALSE_STRINGS
    return False


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple, Mapping))


def is_email_address(value: Any) -> bool:
    return isinstance(value, str) and is_email(value)
