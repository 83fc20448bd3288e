"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

from typing import TextIO


def put_char(c: str, stream: TextIO) -> None:
    """Write the single character *c* to *stream*."""
    if not isinstance(c, str):
        raise TypeError(f"expected a str, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)} characters")
    stream.write(c)


def put_str(text: str, stream: TextIO) -> None:
    """Write *text* to *stream* unchanged."""
    if not isinstance(text, str):
        raise TypeError(f"expected a str, got {type(text).__name__}")
    stream.write(text)


def put_endl(text: str, stream: TextIO) -> None:
    """Write *text* followed by a newline to *stream*."""
    put_str(text, stream)
    put_char("\n", stream)


def put_nbr(n: int, stream: TextIO) -> None:
    """Write the decimal form of the integer *n* to *stream*."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if n < 0:
        put_char("-", stream)
        n = -n
    stream.write("".join(_digits(n)))


def _digits(n: int) -> list[str]:
    """Decimal digits of a non-negative integer, most significant first."""
    digits = []
    while True:
        n, rem = divmod(n, 10)
        digits.append(chr(ord("0") + rem))
        if n == 0:
            break
    digits.reverse()
    return digits