"""Fixed-width big-integer operations on little-endian 32-bit word lists.

Every function takes numbers as sequences of 32-bit words, least significant
word first, and returns new lists; inputs are never modified. The width of a
number is the length of its word sequence.
"""

from __future__ import annotations

import string
from typing import Sequence

from ecparams.types import (
    BITS_PER_WORD,
    BYTES_PER_WORD,
    UINT_T_MAX,
    int_to_words,
    words_to_int,
)

_HEX_DIGITS = frozenset(string.hexdigits)


def _require_words(a: Sequence[int]) -> int:
    if not a:
        raise ValueError("big integers must hold at least one word")
    return len(a)


def _same_length(a: Sequence[int], b: Sequence[int]) -> int:
    length = _require_words(a)
    if len(b) != length:
        raise ValueError("big integers must have the same length")
    return length


def _truncate(value: int, length: int) -> list[int]:
    return int_to_words(value & ((1 << (BITS_PER_WORD * length)) - 1), length)


def add(a: Sequence[int], b: Sequence[int], carry: int = 0) -> tuple[list[int], int]:
    """Return ``(a + b + carry)`` truncated to the width, and the carry out."""
    length = _same_length(a, b)
    total = words_to_int(a) + words_to_int(b) + carry
    return _truncate(total, length), total >> (BITS_PER_WORD * length)


def subtract(a: Sequence[int], b: Sequence[int], carry: int = 0) -> tuple[list[int], int]:
    """Return ``(a - b + carry)`` truncated to the width, and the carry out.

    The carry out is 0 when no borrow occurred and -1 when it did.
    """
    length = _same_length(a, b)
    total = words_to_int(a) - words_to_int(b) + carry
    return _truncate(total, length), total >> (BITS_PER_WORD * length)


def xor(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the word-wise exclusive or of two numbers."""
    _same_length(a, b)
    return [x ^ y for x, y in zip(a, b)]


def _check_shift(bits: int, length: int) -> None:
    if not 0 <= bits < BITS_PER_WORD * length:
        raise ValueError(f"shift of {bits} bits is out of range for {length} words")


def shift_left(a: Sequence[int], bits: int) -> list[int]:
    """Shift left by ``bits``; bits shifted out of the width are dropped."""
    length = _require_words(a)
    _check_shift(bits, length)
    return _truncate(words_to_int(a) << bits, length)


def shift_right(a: Sequence[int], bits: int) -> list[int]:
    """Shift right by ``bits``, filling with zeros."""
    length = _require_words(a)
    _check_shift(bits, length)
    return int_to_words(words_to_int(a) >> bits, length)


def compare(a: Sequence[int], b: Sequence[int]) -> int:
    """Return -1, 0 or 1 as ``a`` is less than, equal to or greater than ``b``."""
    _same_length(a, b)
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            return 1 if x > y else -1
    return 0


def is_zero(a: Sequence[int]) -> bool:
    """Tell whether the number is zero."""
    _require_words(a)
    return not any(a)


def is_one(a: Sequence[int]) -> bool:
    """Tell whether the number is one."""
    _require_words(a)
    return a[0] == 1 and not any(a[1:])


def multiply(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the full product, ``len(a) + len(b)`` words wide."""
    _require_words(a)
    _require_words(b)
    return int_to_words(words_to_int(a) * words_to_int(b), len(a) + len(b))


def format_words(a: Sequence[int]) -> str:
    """Render the words in hex, most significant first, separated by spaces."""
    _require_words(a)
    return " ".join(f"{word:08X}" for word in reversed(a))


def _check_bit(bit: int, length: int) -> None:
    if not 0 <= bit < BITS_PER_WORD * length:
        raise IndexError(f"bit {bit} is out of range for {length} words")


def set_bit(a: Sequence[int], bit: int, value: int) -> list[int]:
    """Return a copy of ``a`` with the given bit set to ``value`` (0 or 1)."""
    length = _require_words(a)
    _check_bit(bit, length)
    if value not in (0, 1):
        raise ValueError(f"bit value must be 0 or 1, not {value!r}")
    result = list(a)
    word, offset = divmod(bit, BITS_PER_WORD)
    if value:
        result[word] |= 1 << offset
    else:
        result[word] &= ~(1 << offset) & UINT_T_MAX
    return result


def test_bit(a: Sequence[int], bit: int) -> int:
    """Return the value (0 or 1) of the given bit."""
    length = _require_words(a)
    _check_bit(bit, length)
    word, offset = divmod(bit, BITS_PER_WORD)
    return (a[word] >> offset) & 1


def msb(a: Sequence[int]) -> int:
    """Return the index of the highest set bit, or -1 if the number is zero."""
    _require_words(a)
    return words_to_int(a).bit_length() - 1


def _check_byte(index: int, length: int) -> None:
    if not 0 <= index < BYTES_PER_WORD * length:
        raise IndexError(f"byte {index} is out of range for {length} words")


def get_byte(a: Sequence[int], index: int) -> int:
    """Return byte ``index``, counted from the least significant byte."""
    length = _require_words(a)
    _check_byte(index, length)
    word, offset = divmod(index, BYTES_PER_WORD)
    return (a[word] >> (8 * offset)) & 0xFF


def set_byte(a: Sequence[int], index: int, value: int) -> list[int]:
    """Return a copy of ``a`` with byte ``index`` replaced by ``value``."""
    length = _require_words(a)
    _check_byte(index, length)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value!r}")
    result = list(a)
    word, offset = divmod(index, BYTES_PER_WORD)
    shift = 8 * offset
    result[word] = (result[word] & ~(0xFF << shift) & UINT_T_MAX) | (value << shift)
    return result


def parse_hex(text: str, length: int) -> tuple[list[int], int]:
    """Parse a hex string into ``length`` words.

    Characters that are not hex digits are ignored. Returns the words and the
    number of words the parsed digits occupy.
    """
    if length < 1:
        raise ValueError("length must be at least one word")
    digits = "".join(char for char in text if char in _HEX_DIGITS)
    if len(digits) > 2 * BYTES_PER_WORD * length:
        raise ValueError(f"hex string does not fit into {length} words")
    value = int(digits, 16) if digits else 0
    used = -(-len(digits) // (2 * BYTES_PER_WORD))
    return int_to_words(value, length), used


def hamming_weight(a: Sequence[int]) -> int:
    """Return the number of set bits."""
    _require_words(a)
    return sum(bin(word).count("1") for word in a)


def divide(numerator: Sequence[int], denominator: Sequence[int]) -> tuple[list[int], list[int]]:
    """Return quotient and remainder of ``numerator / denominator``."""
    length = _same_length(numerator, denominator)
    divisor = words_to_int(denominator)
    if divisor == 0:
        raise ZeroDivisionError("big integer division by zero")
    quotient, remainder = divmod(words_to_int(numerator), divisor)
    return int_to_words(quotient, length), int_to_words(remainder, length)