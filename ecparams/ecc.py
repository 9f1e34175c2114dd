"""Elliptic curve point arithmetic in affine coordinates.

Coordinates and the curve constants use the representation of the curve's
prime data: when ``montgomery_domain`` is set they are in Montgomery form.
"""

from __future__ import annotations

from ecparams import field
from ecparams.types import AffinePoint, CurveParameters, PrimeData

_IDENTITY = AffinePoint(0, 0, True)


class _Field:
    """Field operations in the representation the curve uses."""

    def __init__(self, prime_data: PrimeData) -> None:
        self.data = prime_data
        self.prime = prime_data.prime
        if prime_data.montgomery_domain:
            self.one = prime_data.gfp_one or field.compute_r(self.prime, prime_data.words)
        else:
            self.one = 1 % self.prime

    def mul(self, a: int, b: int) -> int:
        if self.data.montgomery_domain:
            return field.mont_multiply(a, b, self.data)
        return field.multiply_div(a, b, self.data)

    def inv(self, a: int) -> int:
        if self.data.montgomery_domain:
            return field.mont_inverse(a, self.data)
        return field.binary_euclidean_inverse(a, self.data)

    def add(self, a: int, b: int) -> int:
        return field.add(a, b, self.data)

    def sub(self, a: int, b: int) -> int:
        return field.subtract(a, b, self.data)


def point_is_valid(point: AffinePoint, params: CurveParameters) -> bool:
    """Tell whether the point is the identity or lies on the curve."""
    if point.identity:
        return True
    f = _Field(params.prime_data)
    if not (0 <= point.x < f.prime and 0 <= point.y < f.prime):
        return False
    left = f.mul(point.y, point.y)
    right = f.add(
        f.add(f.mul(f.mul(point.x, point.x), point.x), f.mul(params.param_a, point.x)),
        params.param_b,
    )
    return left == right


def point_equals(first: AffinePoint, second: AffinePoint, params: CurveParameters) -> bool:
    """Tell whether two affine points are the same point."""
    if first.identity or second.identity:
        return first.identity and second.identity
    prime = params.prime_data.prime
    return first.x % prime == second.x % prime and first.y % prime == second.y % prime


def point_double(point: AffinePoint, params: CurveParameters) -> AffinePoint:
    """Return ``2 * point``."""
    f = _Field(params.prime_data)
    if point.identity or point.y % f.prime == 0:
        return _IDENTITY
    x_squared = f.mul(point.x, point.x)
    numerator = f.add(f.add(f.add(x_squared, x_squared), x_squared), params.param_a)
    slope = f.mul(numerator, f.inv(f.add(point.y, point.y)))
    x = f.sub(f.sub(f.mul(slope, slope), point.x), point.x)
    y = f.sub(f.mul(slope, f.sub(point.x, x)), point.y)
    return AffinePoint(x, y, False)


def point_add(first: AffinePoint, second: AffinePoint, params: CurveParameters) -> AffinePoint:
    """Return ``first + second``."""
    if first.identity:
        return second
    if second.identity:
        return first
    f = _Field(params.prime_data)
    if first.x % f.prime == second.x % f.prime:
        if first.y % f.prime == second.y % f.prime:
            return point_double(first, params)
        return _IDENTITY
    slope = f.mul(f.sub(second.y, first.y), f.inv(f.sub(second.x, first.x)))
    x = f.sub(f.sub(f.mul(slope, slope), first.x), second.x)
    y = f.sub(f.mul(slope, f.sub(first.x, x)), first.y)
    return AffinePoint(x, y, False)


def point_negate(point: AffinePoint, params: CurveParameters) -> AffinePoint:
    """Return ``-point``."""
    if point.identity:
        return _IDENTITY
    return AffinePoint(point.x, field.negate(point.y, params.prime_data), False)


def point_subtract(
    minuend: AffinePoint, subtrahend: AffinePoint, params: CurveParameters
) -> AffinePoint:
    """Return ``minuend - subtrahend``."""
    return point_add(minuend, point_negate(subtrahend, params), params)


def protected_multiply(point: AffinePoint, scalar: int, params: CurveParameters) -> AffinePoint:
    """Return ``scalar * point`` with a Montgomery ladder of fixed length.

    The ladder always runs over at least as many bits as the group order has,
    performing one addition and one doubling per bit.
    """
    if scalar < 0:
        raise ValueError("scalar must not be negative")
    steps = max(params.order_n_data.bits, scalar.bit_length())
    low, high = _IDENTITY, point
    for bit in reversed(range(steps)):
        if (scalar >> bit) & 1:
            low, high = point_add(low, high, params), point_double(high, params)
        else:
            high, low = point_add(low, high, params), point_double(low, params)
    return low


def generic_multiply(point: AffinePoint, scalar: int, params: CurveParameters) -> AffinePoint:
    """Return ``scalar * point`` using the curve's configured multiplication.

    Falls back to :func:`protected_multiply` when none is configured.
    """
    multiply = params.eccp_mul
    if multiply is None or multiply is generic_multiply:
        return protected_multiply(point, scalar, params)
    return multiply(point, scalar, params)