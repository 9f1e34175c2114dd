"""Core data types and word-size helpers for prime-field elliptic curve arithmetic.

Field elements are held as Python integers. Where a fixed-width, word-oriented
view is needed, a number is a list of 32-bit words with the least significant
word first.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

BYTES_PER_WORD = 4
BITS_PER_WORD = BYTES_PER_WORD << 3
LD_BITS_PER_WORD = 5
LD_BYTES_PER_WORD = 2
UINT_T_MAX = 0xFFFFFFFF

#: The number of bits that every field element must be able to hold.
MIN_BITS_PER_GFP = 521


def words_per_bits(bits: int) -> int:
    """Return the number of 32-bit words needed to store ``bits`` bits."""
    return ((bits - 1) >> LD_BITS_PER_WORD) + 1


def bytes_per_bits(bits: int) -> int:
    """Return the number of bytes needed to store ``bits`` bits."""
    return ((bits - 1) >> 3) + 1


WORDS_PER_GFP = words_per_bits(MIN_BITS_PER_GFP)
BYTES_PER_GFP = WORDS_PER_GFP * BYTES_PER_WORD
BITS_PER_GFP = WORDS_PER_GFP * BITS_PER_WORD


def words_to_int(words: Sequence[int]) -> int:
    """Combine little-endian 32-bit words into one integer."""
    value = 0
    for word in reversed(words):
        if not 0 <= word <= UINT_T_MAX:
            raise ValueError(f"word out of range: {word!r}")
        value = (value << BITS_PER_WORD) | word
    return value


def int_to_words(value: int, length: int) -> list[int]:
    """Split a non-negative integer into ``length`` little-endian 32-bit words."""
    if length < 0:
        raise ValueError("length must not be negative")
    if value < 0:
        raise ValueError("value must not be negative")
    if value >> (BITS_PER_WORD * length):
        raise ValueError(f"value does not fit into {length} words")
    return [(value >> (BITS_PER_WORD * i)) & UINT_T_MAX for i in range(length)]


class CurveType(enum.IntEnum):
    """The named curves known to the library."""

    UNKNOWN = 0
    SECP192R1 = 1
    SECP224R1 = 2
    SECP256R1 = 3
    SECP384R1 = 4
    SECP521R1 = 5
    CUSTOM = 6


@dataclass(frozen=True)
class PrimeData:
    """Parameters for arithmetic modulo a prime, including Montgomery constants.

    R is taken to be ``1 << (words * BITS_PER_WORD)``.
    """

    prime: int
    bits: int
    words: int
    montgomery_domain: bool = False
    n0: int = 0
    r_squared: int = 0
    gfp_one: int = 0


@dataclass(frozen=True)
class AffinePoint:
    """An elliptic curve point in affine coordinates."""

    x: int = 0
    y: int = 0
    identity: bool = False


@dataclass(frozen=True)
class ProjectivePoint:
    """An elliptic curve point in projective (x, y, z) coordinates."""

    x: int = 0
    y: int = 0
    z: int = 0
    identity: bool = False


PointMultiply = Callable[[AffinePoint, int, "CurveParameters"], AffinePoint]
BasePointMultiply = Callable[[int, "CurveParameters"], AffinePoint]


@dataclass
class CurveParameters:
    """Everything needed to compute on the curve y^2 = x^3 + ax + b."""

    prime_data: PrimeData
    order_n_data: PrimeData
    h: int
    param_a: int
    param_b: int
    base_point: AffinePoint
    curve_type: CurveType = CurveType.UNKNOWN
    eccp_mul: Optional[PointMultiply] = None
    base_point_precomputed_table: Optional[list[AffinePoint]] = field(default=None)
    base_point_precomputed_table_width: int = 0
    eccp_mul_base_point: Optional[BasePointMultiply] = None


@dataclass(frozen=True)
class EcdsaSignature:
    """An ECDSA signature; both parts are elements modulo the group order."""

    r: int
    s: int