"""Standard curve constants and loading of curve parameters by name or type.

The constants of the field prime's domain (curve coefficients and base point)
are stored in Montgomery form, since every named curve computes modulo its
prime in the Montgomery domain.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Sequence, Union

from ecparams import field
from ecparams.ecc import protected_multiply
from ecparams.types import (
    MIN_BITS_PER_GFP,
    AffinePoint,
    CurveParameters,
    CurveType,
    words_to_int,
)


@dataclass(frozen=True)
class CurveConstants:
    """The fixed numbers that define one named curve."""

    prime: int
    prime_bits: int
    order_n: int
    order_n_bits: int
    param_a: int
    param_b: int
    base_x: int
    base_y: int
    cofactor: int
    order_montgomery_domain: bool

    @classmethod
    def from_words(
        cls,
        *,
        prime: Sequence[int],
        prime_bits: int,
        order_n: Sequence[int],
        order_n_bits: int,
        param_a: Sequence[int],
        param_b: Sequence[int],
        base_x: Sequence[int],
        base_y: Sequence[int],
        cofactor: int,
        order_montgomery_domain: bool,
    ) -> "CurveConstants":
        """Build the constants from little-endian 32-bit word tables."""
        return cls(
            prime=words_to_int(prime),
            prime_bits=prime_bits,
            order_n=words_to_int(order_n),
            order_n_bits=order_n_bits,
            param_a=words_to_int(param_a),
            param_b=words_to_int(param_b),
            base_x=words_to_int(base_x),
            base_y=words_to_int(base_y),
            cofactor=cofactor,
            order_montgomery_domain=order_montgomery_domain,
        )


_SECP192R1 = CurveConstants.from_words(
    prime=(0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFE, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF),
    prime_bits=192,
    order_n=(0xB4D22831, 0x146BC9B1, 0x99DEF836, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF),
    order_n_bits=192,
    param_a=(0xFFFFFFFC, 0xFFFFFFFF, 0xFFFFFFFB, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF),
    param_b=(0xA6E33A98, 0x62D9E406, 0x19076AE2, 0x7281CDB2, 0x57C0B131, 0x73C8EEC5),
    base_x=(0x332FA108, 0x0D8CB30C, 0x76D12909, 0x8A4BD3F7, 0xF3D218F7, 0x954CC8F9),
    base_y=(0x1E422289, 0x7B12A337, 0x8966F05E, 0xDE22B524, 0x6AEDA84D, 0x6A293D83),
    cofactor=1,
    order_montgomery_domain=True,
)

_SECP224R1 = CurveConstants.from_words(
    prime=(0x00000001, 0x00000000, 0x00000000, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF),
    prime_bits=224,
    order_n=(0x5C5C2A3D, 0x13DD2945, 0xE0B8F03E, 0xFFFF16A2, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF),
    order_n_bits=224,
    param_a=(0x00000004, 0x00000000, 0x00000000, 0xFFFFFFFC, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF),
    param_b=(0xE768CDF7, 0xCCF01310, 0x743B1CC0, 0xC8528150, 0x3DCEBA98, 0x7FC02F93, 0x9C3FA633),
    base_x=(0xBC905227, 0x6018BFAA, 0xF22FE220, 0xF96BEC04, 0x6DD3AF9B, 0xA21B5E60, 0x92F5B516),
    base_y=(0x2EDCA1E6, 0x05335A6B, 0xE8C15513, 0x03DFE878, 0xAEA9C5AE, 0x614786F1, 0x100C1218),
    cofactor=1,
    order_montgomery_domain=False,
)

_SECP256R1 = CurveConstants.from_words(
    prime=(0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0x00000000,
           0x00000000, 0x00000000, 0x00000001, 0xFFFFFFFF),
    prime_bits=256,
    order_n=(0xFC632551, 0xF3B9CAC2, 0xA7179E84, 0xBCE6FAAD,
             0xFFFFFFFF, 0xFFFFFFFF, 0x00000000, 0xFFFFFFFF),
    order_n_bits=256,
    param_a=(0xFFFFFFFC, 0xFFFFFFFF, 0xFFFFFFFF, 0x00000003,
             0x00000000, 0x00000000, 0x00000004, 0xFFFFFFFC),
    param_b=(0x29C4BDDF, 0xD89CDF62, 0x78843090, 0xACF005CD,
             0xF7212ED6, 0xE5A220AB, 0x04874834, 0xDC30061D),
    base_x=(0x18A9143C, 0x79E730D4, 0x5FEDB601, 0x75BA95FC,
            0x77622510, 0x79FB732B, 0xA53755C6, 0x18905F76),
    base_y=(0xCE95560A, 0xDDF25357, 0xBA19E45C, 0x8B4AB8E4,
            0xDD21F325, 0xD2E88688, 0x25885D85, 0x8571FF18),
    cofactor=1,
    order_montgomery_domain=False,
)

_SECP384R1 = CurveConstants.from_words(
    prime=(0xFFFFFFFF, 0x00000000, 0x00000000, 0xFFFFFFFF, 0xFFFFFFFE, 0xFFFFFFFF,
           0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF),
    prime_bits=384,
    order_n=(0xCCC52973, 0xECEC196A, 0x48B0A77A, 0x581A0DB2, 0xF4372DDF, 0xC7634D81,
             0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF),
    order_n_bits=384,
    param_a=(0xFFFFFFFC, 0x00000003, 0x00000000, 0xFFFFFFFC, 0xFFFFFFFB, 0xFFFFFFFF,
             0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF),
    param_b=(0x9D412DCC, 0x08118871, 0x7A4C32EC, 0xF729ADD8, 0x1920022E, 0x77F2209B,
             0x94938AE2, 0xE3374BEE, 0x1F022094, 0xB62B21F4, 0x604FBFF9, 0xCD08114B),
    base_x=(0x49C0B528, 0x3DD07566, 0xA0D6CE38, 0x20E378E2, 0x541B4D6E, 0x879C3AFC,
            0x59A30EFF, 0x64548684, 0x614EDE2B, 0x812FF723, 0x299E1513, 0x4D3AADC2),
    base_y=(0x4B03A4FE, 0x23043DAD, 0x7BB4A9AC, 0xA1BFA8BF, 0x2E83B050, 0x8BADE756,
            0x68F4FFD9, 0xC6C35219, 0x3969A840, 0xDD800226, 0x5A15C5E9, 0x2B78ABC2),
    cofactor=1,
    order_montgomery_domain=False,
)

_SECP521R1 = CurveConstants.from_words(
    prime=(0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF,
           0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF,
           0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0x000001FF),
    prime_bits=521,
    order_n=(0x91386409, 0xBB6FB71E, 0x899C47AE, 0x3BB5C9B8, 0xF709A5D0, 0x7FCC0148,
             0xBF2F966B, 0x51868783, 0xFFFFFFFA, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF,
             0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0x000001FF),
    order_n_bits=521,
    param_a=(0xFE7FFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF,
             0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF,
             0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0x000001FF),
    param_b=(0x8014654F, 0xEA35A81F, 0x78F7A28F, 0xC41E961A, 0x839AB9EF, 0x5E9DD8DF,
             0xBD8B2960, 0xA8F63F49, 0xF0AB0C9C, 0xC8C77884, 0xF9DC5A44, 0x2DCCD98A,
             0x77516D39, 0xD05B42A0, 0x0FC94D10, 0xB0C70E4D, 0x0000015C),
    base_x=(0xB331A163, 0x18E172DE, 0x4DFCBF3F, 0xE0C2B521, 0x6F19A459, 0x93D17FD4,
            0x947F0EE0, 0x3BF7F3AC, 0xDD50A5AF, 0xB035A69E, 0x90FC1457, 0x9C829FDA,
            0x214E3240, 0xB311CADA, 0xE6CF1F65, 0x5B820274, 0x00000103),
    base_y=(0x28460E4A, 0x3B4FE8B3, 0x20445F4A, 0x43513961, 0xB09A9E38, 0x809FD683,
            0x2062A85C, 0x4CAF7A13, 0x164BF739, 0x8B939F33, 0x340BD7DE, 0x24ABCDA2,
            0xECCC7AA2, 0xDA163E8D, 0x022E452F, 0x3C4D1DE0, 0x000000B5),
    cofactor=1,
    order_montgomery_domain=False,
)

#: Constants of every named curve that fits into a field element.
CURVES: Mapping[CurveType, CurveConstants] = MappingProxyType(
    {
        curve_type: constants
        for curve_type, constants in (
            (CurveType.SECP192R1, _SECP192R1),
            (CurveType.SECP224R1, _SECP224R1),
            (CurveType.SECP256R1, _SECP256R1),
            (CurveType.SECP384R1, _SECP384R1),
            (CurveType.SECP521R1, _SECP521R1),
        )
        if constants.prime_bits <= MIN_BITS_PER_GFP
    }
)

_CURVE_NAMES: tuple[tuple[str, CurveType], ...] = tuple(
    (curve_type.name.lower(), curve_type) for curve_type in CURVES
) + (("custom", CurveType.CUSTOM),)


def bounded_compare(first: str, second: str) -> int:
    """Compare two strings over the length of the shorter one.

    Returns the difference of the first pair of characters that differ, or of
    the last pair compared, so 0 means the shorter string is a prefix of the
    longer one.
    """
    if not first or not second:
        raise ValueError("both strings must hold at least one character")
    for a, b in zip(first, second):
        if a != b:
            return ord(a) - ord(b)
    return 0


def curve_type_from_name(name: str) -> CurveType:
    """Determine the curve type named by ``name``.

    The name is matched against the known names in order, over the length of
    the shorter string; an empty or unmatched name gives ``UNKNOWN``.
    """
    if not name:
        return CurveType.UNKNOWN
    for known, curve_type in _CURVE_NAMES:
        if bounded_compare(name, known) == 0:
            return curve_type
    return CurveType.UNKNOWN


def load_params(curve_type: Union[CurveType, int]) -> CurveParameters:
    """Return the full parameter set of a named curve.

    Raises ``ValueError`` for curve types that have no built-in constants.
    """
    curve_type = CurveType(curve_type)
    try:
        constants = CURVES[curve_type]
    except KeyError:
        raise ValueError(f"no built-in parameters for curve {curve_type.name}") from None

    prime_data = field.make_prime_data(constants.prime, constants.prime_bits, True)
    order_n_data = field.make_prime_data(
        constants.order_n, constants.order_n_bits, constants.order_montgomery_domain
    )
    return CurveParameters(
        prime_data=prime_data,
        order_n_data=order_n_data,
        h=constants.cofactor,
        param_a=constants.param_a,
        param_b=constants.param_b,
        base_point=AffinePoint(constants.base_x, constants.base_y, False),
        curve_type=curve_type,
        eccp_mul=protected_multiply,
        base_point_precomputed_table=None,
        base_point_precomputed_table_width=0,
        eccp_mul_base_point=None,
    )