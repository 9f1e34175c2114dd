"""Lenient parsing of decimal integers and hexadecimal strings."""

from __future__ import annotations

from typing import Optional


def parse_integer(text: str) -> int:
    """Parse a leading, optionally negative, run of decimal digits.

    Parsing stops at the first character that is not a digit; if there are no
    digits the result is 0.
    """
    negative = text.startswith("-")
    if negative:
        text = text[1:]
    number = 0
    for char in text:
        if not "0" <= char <= "9":
            break
        number = number * 10 + (ord(char) - ord("0"))
    return -number if negative else number


def _nibble(char: str) -> int:
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "A" <= char <= "F":
        return ord(char) - ord("A") + 10
    if "a" <= char <= "f":
        return ord(char) - ord("a") + 10
    return 0


def parse_hex_byte(text: str) -> int:
    """Read one byte from the first two characters of ``text``.

    The first character is the high nibble. Characters that are not hex
    digits, or are missing, count as zero.
    """
    high = _nibble(text[0]) if len(text) > 0 else 0
    low = _nibble(text[1]) if len(text) > 1 else 0
    return (high << 4) | low


def parse_hex_message(text: str, max_length: Optional[int] = None) -> bytes:
    """Decode pairs of hex characters into bytes.

    A trailing odd character is ignored. At most ``max_length`` bytes are
    produced; ``None`` or a limit below one places no bound.
    """
    message = bytearray()
    for start in range(0, len(text) - 1, 2):
        message.append(parse_hex_byte(text[start:start + 2]))
        if len(message) == max_length:
            break
    return bytes(message)