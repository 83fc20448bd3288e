"""ASCII character classification and case conversion.

Each function accepts either an integer code point or a one-character
string.  Classification returns a bool; case conversion returns a value of
the same kind it was given.
"""

from __future__ import annotations

from typing import Union

Char = Union[int, str]

_UPPER_FIRST = ord("A")
_UPPER_LAST = ord("Z")
_LOWER_FIRST = ord("a")
_LOWER_LAST = ord("z")
_DIGIT_FIRST = ord("0")
_DIGIT_LAST = ord("9")
_CASE_OFFSET = _LOWER_FIRST - _UPPER_FIRST


def _code(c: Char) -> int:
    """Return the integer code of *c*, validating its form."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _is_upper(code: int) -> bool:
    return _UPPER_FIRST <= code <= _UPPER_LAST


def _is_lower(code: int) -> bool:
    return _LOWER_FIRST <= code <= _LOWER_LAST


def is_alpha(c: Char) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: Char) -> bool:
    """True for ASCII digits 0-9."""
    return _DIGIT_FIRST <= _code(c) <= _DIGIT_LAST


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def to_upper(c: Char) -> Char:
    """Map an ASCII lowercase letter to uppercase; leave anything else alone."""
    code = _code(c)
    result = code - _CASE_OFFSET if _is_lower(code) else code
    return chr(result) if isinstance(c, str) else result


def to_lower(c: Char) -> Char:
    """Map an ASCII uppercase letter to lowercase; leave anything else alone."""
    code = _code(c)
    result = code + _CASE_OFFSET if _is_upper(code) else code
    return chr(result) if isinstance(c, str) else result