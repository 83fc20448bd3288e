"""String and byte-buffer helpers: parsing, searching, slicing and comparing.

Searches return an index into the text, or ``None`` when nothing matches.
Comparisons return the difference between the first pair of codes that
differ, so only the sign of a non-zero result carries meaning.
"""

from __future__ import annotations

from itertools import islice, takewhile, zip_longest
from typing import Callable, Optional, Union

from minishell.chars import is_digit

Char = Union[int, str]
Buffer = Union[bytes, bytearray, memoryview]

_WHITESPACE = " \t\n\v\f\r"


def _require_str(value: object, name: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")


def _require_count(value: object, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _as_char(c: Char) -> str:
    """Turn an integer code or a one-character string into a character."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional ``+`` or ``-`` is accepted,
    and digits are read until the first non-digit.  Text with no digits
    parses as 0.
    """
    _require_str(text, "text")
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = "".join(takewhile(is_digit, rest))
    value = int(digits) if digits else 0
    return -value if negative else value


def itoa(n: int) -> str:
    """Return the decimal representation of *n*."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the character *sep*, dropping empty pieces."""
    _require_str(text, "text")
    sep = _as_char(sep)
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: Optional[str]) -> str:
    """Remove characters found in *charset* from both ends of *text*.

    With no character set the text is returned unchanged.
    """
    _require_str(text, "text")
    if charset is None:
        return text
    _require_str(charset, "charset")
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* beginning at *start*.

    A start at or past the end of the text yields an empty string.
    """
    _require_str(text, "text")
    _require_count(start, "start")
    _require_count(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find *needle* lying wholly within the first *length* characters.

    An empty needle is found at index 0.
    """
    _require_str(haystack, "haystack")
    _require_str(needle, "needle")
    _require_count(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most *n* characters of two strings.

    The end of a string, or an embedded NUL, counts as code 0 and ends the
    comparison.
    """
    _require_str(a, "a")
    _require_str(b, "b")
    _require_count(n, "n")
    pairs = zip_longest(map(ord, a), map(ord, b), fillvalue=0)
    for code_a, code_b in islice(pairs, n):
        if code_a == 0 or code_b == 0 or code_a != code_b:
            return code_a - code_b
    return 0


def strchr(text: str, c: Char) -> Optional[int]:
    """Index of the first occurrence of *c* in *text*.

    Searching for NUL finds the end of the text.
    """
    _require_str(text, "text")
    ch = _as_char(c)
    index = text.find(ch)
    if index >= 0:
        return index
    return len(text) if ch == "\0" else None


def strrchr(text: str, c: Char) -> Optional[int]:
    """Index of the last occurrence of *c* in *text*.

    Searching for NUL finds the end of the text.
    """
    _require_str(text, "text")
    ch = _as_char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return index if index >= 0 else None


def strmapi(text: Optional[str], func: Callable[[int, str], str]) -> str:
    """Build a string by applying ``func(index, char)`` to each character.

    A missing text maps to the empty string.
    """
    if text is None:
        return ""
    _require_str(text, "text")
    return "".join(func(index, ch) for index, ch in enumerate(text))


def _prefix(data: Buffer, n: int, name: str) -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes-like, got {type(data).__name__}")
    view = bytes(data)
    if n > len(view):
        raise ValueError(f"{name} holds {len(view)} bytes, fewer than {n}")
    return view[:n]


def memchr(data: Buffer, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c & 0xFF`` among the first *n* bytes."""
    _require_count(n, "n")
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"c must be an int, got {type(c).__name__}")
    index = _prefix(data, n, "data").find(c & 0xFF)
    return index if index >= 0 else None


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first *n* bytes of two buffers as unsigned values."""
    _require_count(n, "n")
    left = _prefix(a, n, "a")
    right = _prefix(b, n, "b")
    for byte_a, byte_b in zip(left, right):
        if byte_a != byte_b:
            return byte_a - byte_b
    return 0