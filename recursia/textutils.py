"""Text helpers: number formatting, pluralisation, quoting and simple templating."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

_QUOTE = '"'
_ESCAPED = {'"': '\\"', "'": "\\'", "\\": "\\\\"}
_UNESCAPED = {'"': b'"', "'": b"'", "\\": b"\\"}
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class RecursiaError(Exception):
    """Raised when a routine is given input it cannot work with."""


def add_commas_to(value: int) -> str:
    """Return the integer written with commas between groups of three digits."""
    return f"{int(value):,}"


def pluralize(value: int, singular: str, plural: str | None = None) -> str:
    """Return the quantity followed by the singular or plural noun."""
    if plural is None:
        plural = singular + "s"
    return f"{add_commas_to(value)} {singular if value == 1 else plural}"


def _escape_byte(byte: int) -> str:
    char = chr(byte)
    if char in _ESCAPED:
        return _ESCAPED[char]
    if 0x20 <= byte <= 0x7E:
        return char
    return f"\\x{byte:02x}"


def quoted_version_of(text: str) -> str:
    """Quote text in double quotes, escaping quotes, backslashes and unprintables."""
    body = "".join(_escape_byte(byte) for byte in text.encode("utf-8"))
    return f"{_QUOTE}{body}{_QUOTE}"


def _read_char(stream: TextIO) -> str:
    char = stream.read(1)
    if not char:
        raise ValueError("unexpected end of quoted string")
    return char


def read_quoted_version_of(stream: TextIO) -> str:
    """Read one string written by quoted_version_of from a text stream.

    Raises ValueError if the stream does not hold a well-formed quoted string.
    """
    if stream.read(1) != _QUOTE:
        raise ValueError("quoted string must start with a double quote")

    result = bytearray()
    while True:
        char = _read_char(stream)
        if char == _QUOTE:
            return result.decode("utf-8")
        if char != "\\":
            result += char.encode("utf-8")
            continue

        escape = _read_char(stream)
        if escape in _UNESCAPED:
            result += _UNESCAPED[escape]
        elif escape == "x":
            digits = _read_char(stream) + _read_char(stream)
            if not all(digit in _HEX_DIGITS for digit in digits):
                raise ValueError(f"invalid hex escape: \\x{digits}")
            result.append(int(digits, 16))
        else:
            raise ValueError(f"unknown escape sequence: \\{escape}")


def format_pattern(pattern: str, *args: object) -> str:
    """Replace each %s in the pattern, in order, with the matching argument.

    Raises RecursiaError if the count of placeholders and arguments differ.
    """
    pieces: list[str] = []
    rest = pattern
    for arg in args:
        head, sep, tail = rest.partition("%s")
        if not sep:
            raise RecursiaError("No pattern to replace?")
        pieces.append(head)
        pieces.append(arg if isinstance(arg, str) else str(arg))
        rest = tail
    if "%s" in rest:
        raise RecursiaError("Unmatched pattern string?")
    pieces.append(rest)
    return "".join(pieces)


def conjunction_join(items: Iterable[str], conjunction: str) -> str:
    """Join strings as "A", "A and B" or "A, B, and C"."""
    words = list(items)
    if not words:
        return ""
    if len(words) == 1:
        return words[0]
    if len(words) == 2:
        return f"{words[0]} {conjunction} {words[1]}"
    return ", ".join(words[:-1]) + f", {conjunction} {words[-1]}"