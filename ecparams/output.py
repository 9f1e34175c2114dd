"""Writing and reading text, and rendering numbers and points for display."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from ecparams import field
from ecparams.bigint import format_words
from ecparams.types import UINT_T_MAX, AffinePoint, CurveParameters, int_to_words


def write(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` to ``stream`` (standard output by default) and flush it."""
    target = stream if stream is not None else sys.stdout
    target.write(text)
    target.flush()


def read_line(stream: Optional[TextIO] = None, max_length: Optional[int] = None) -> str:
    """Read one line without its line ending, at most ``max_length`` characters.

    Raises ``EOFError`` when the stream is exhausted.
    """
    if max_length is not None and max_length < 1:
        raise ValueError("max_length must be at least one")
    source = stream if stream is not None else sys.stdin
    line = source.readline()
    if not line:
        raise EOFError("end of input")
    line = line.rstrip("\r\n")
    return line if max_length is None else line[:max_length]


def format_integer(value: int) -> str:
    """Render a 32-bit unsigned word in decimal."""
    if not 0 <= value <= UINT_T_MAX:
        raise ValueError(f"value out of word range: {value!r}")
    return str(value)


def format_bigint(words: Sequence[int]) -> str:
    """Render a word list in hex, most significant word first, space separated."""
    return format_words(words)


def format_bytes(data: bytes) -> str:
    """Render bytes as upper-case hex, two digits per byte."""
    return bytes(data).hex().upper()


def format_affine_point(point: AffinePoint, params: CurveParameters) -> str:
    """Render a point's coordinates in normal representation, one per line."""
    if point.identity:
        return "identity"
    prime_data = params.prime_data
    x, y = point.x, point.y
    if prime_data.montgomery_domain:
        x = field.from_montgomery(x, prime_data)
        y = field.from_montgomery(y, prime_data)
    return (
        f"x: {format_bigint(int_to_words(x, prime_data.words))}\n"
        f"y: {format_bigint(int_to_words(y, prime_data.words))}"
    )