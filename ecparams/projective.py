"""Elliptic curve points in Jacobian and standard projective coordinates.

A Jacobian point (X, Y, Z) stands for the affine point (X / Z^2, Y / Z^3); a
standard projective point (X, Y, Z) stands for (X / Z, Y / Z). Coordinates use
the representation of the curve's prime data, so they are in Montgomery form
when ``montgomery_domain`` is set. Scalar multiplications take an affine point
and return an affine point.
"""

from __future__ import annotations

from ecparams import field
from ecparams.types import AffinePoint, CurveParameters, PrimeData, ProjectivePoint

_AFFINE_IDENTITY = AffinePoint(0, 0, True)


class _Arith:
    """Field operations in the representation the curve uses."""

    def __init__(self, prime_data: PrimeData) -> None:
        self.data = prime_data
        self.prime = prime_data.prime
        self.mont = prime_data.montgomery_domain
        if self.mont:
            self.one = prime_data.gfp_one or field.compute_r(self.prime, prime_data.words)
        else:
            self.one = 1 % self.prime

    def mul(self, a: int, b: int) -> int:
        if self.mont:
            return field.mont_multiply(a, b, self.data)
        return field.multiply_div(a, b, self.data)

    def inv(self, a: int) -> int:
        if self.mont:
            return field.mont_inverse(a, self.data)
        return field.binary_euclidean_inverse(a, self.data)

    def add(self, a: int, b: int) -> int:
        return field.add(a, b, self.data)

    def sub(self, a: int, b: int) -> int:
        return field.subtract(a, b, self.data)

    def neg(self, a: int) -> int:
        return field.negate(a, self.data)

    def is_zero(self, a: int) -> bool:
        return a % self.prime == 0


def _identity(f: _Arith) -> ProjectivePoint:
    return ProjectivePoint(f.one, f.one, 0, True)


def _at_infinity(point: ProjectivePoint, f: _Arith) -> bool:
    return point.identity or f.is_zero(point.z)


def _check_scalar(scalar: int) -> None:
    if scalar < 0:
        raise ValueError("scalar must not be negative")


def _lift(point: AffinePoint, f: _Arith) -> ProjectivePoint:
    if point.identity:
        return _identity(f)
    return ProjectivePoint(point.x % f.prime, point.y % f.prime, f.one, False)


# Jacobian coordinates


def affine_to_jacobian(point: AffinePoint, params: CurveParameters) -> ProjectivePoint:
    """Convert an affine point to Jacobian coordinates with Z = 1."""
    return _lift(point, _Arith(params.prime_data))


def jacobian_to_affine(point: ProjectivePoint, params: CurveParameters) -> AffinePoint:
    """Convert a Jacobian point to affine coordinates."""
    f = _Arith(params.prime_data)
    if _at_infinity(point, f):
        return _AFFINE_IDENTITY
    z_inv = f.inv(point.z)
    z_inv2 = f.mul(z_inv, z_inv)
    z_inv3 = f.mul(z_inv2, z_inv)
    return AffinePoint(f.mul(point.x, z_inv2), f.mul(point.y, z_inv3), False)


def jacobian_is_valid(point: ProjectivePoint, params: CurveParameters) -> bool:
    """Tell whether the Jacobian point is the identity or lies on the curve.

    Checks Y^2 = X^3 + a X Z^4 + b Z^6.
    """
    f = _Arith(params.prime_data)
    if _at_infinity(point, f):
        return True
    z2 = f.mul(point.z, point.z)
    z4 = f.mul(z2, z2)
    z6 = f.mul(z4, z2)
    left = f.mul(point.y, point.y)
    x3 = f.mul(f.mul(point.x, point.x), point.x)
    right = f.add(
        f.add(x3, f.mul(params.param_a, f.mul(point.x, z4))),
        f.mul(params.param_b, z6),
    )
    return left == right


def jacobian_equals(
    first: ProjectivePoint, second: ProjectivePoint, params: CurveParameters
) -> bool:
    """Tell whether two Jacobian points represent the same point."""
    f = _Arith(params.prime_data)
    first_inf, second_inf = _at_infinity(first, f), _at_infinity(second, f)
    if first_inf or second_inf:
        return first_inf and second_inf
    z1s = f.mul(first.z, first.z)
    z2s = f.mul(second.z, second.z)
    if f.mul(first.x, z2s) != f.mul(second.x, z1s):
        return False
    return f.mul(first.y, f.mul(z2s, second.z)) == f.mul(second.y, f.mul(z1s, first.z))


def jacobian_double(point: ProjectivePoint, params: CurveParameters) -> ProjectivePoint:
    """Return ``2 * point`` in Jacobian coordinates."""
    f = _Arith(params.prime_data)
    if _at_infinity(point, f) or f.is_zero(point.y):
        return _identity(f)
    x, y, z = point.x, point.y, point.z
    y2 = f.mul(y, y)
    xy2 = f.mul(x, y2)
    s = f.add(xy2, xy2)
    s = f.add(s, s)
    x2 = f.mul(x, x)
    z2 = f.mul(z, z)
    z4 = f.mul(z2, z2)
    m = f.add(f.add(f.add(x2, x2), x2), f.mul(params.param_a, z4))
    x3 = f.sub(f.sub(f.mul(m, m), s), s)
    y4 = f.mul(y2, y2)
    eight_y4 = f.add(y4, y4)
    eight_y4 = f.add(eight_y4, eight_y4)
    eight_y4 = f.add(eight_y4, eight_y4)
    y3 = f.sub(f.mul(m, f.sub(s, x3)), eight_y4)
    z3 = f.mul(f.add(y, y), z)
    return ProjectivePoint(x3, y3, z3, False)


def jacobian_add(
    first: ProjectivePoint, second: ProjectivePoint, params: CurveParameters
) -> ProjectivePoint:
    """Return ``first + second`` in Jacobian coordinates."""
    f = _Arith(params.prime_data)
    if _at_infinity(first, f):
        return second
    if _at_infinity(second, f):
        return first
    z1s = f.mul(first.z, first.z)
    z2s = f.mul(second.z, second.z)
    u1 = f.mul(first.x, z2s)
    u2 = f.mul(second.x, z1s)
    s1 = f.mul(first.y, f.mul(second.z, z2s))
    s2 = f.mul(second.y, f.mul(first.z, z1s))
    if u1 == u2:
        if s1 == s2:
            return jacobian_double(first, params)
        return _identity(f)
    h = f.sub(u2, u1)
    r = f.sub(s2, s1)
    h2 = f.mul(h, h)
    h3 = f.mul(h, h2)
    u1h2 = f.mul(u1, h2)
    x3 = f.sub(f.sub(f.sub(f.mul(r, r), h3), u1h2), u1h2)
    y3 = f.sub(f.mul(r, f.sub(u1h2, x3)), f.mul(s1, h3))
    z3 = f.mul(h, f.mul(first.z, second.z))
    return ProjectivePoint(x3, y3, z3, False)


def jacobian_add_affine(
    first: ProjectivePoint, second: AffinePoint, params: CurveParameters
) -> ProjectivePoint:
    """Return ``first + second`` for a Jacobian and an affine point."""
    return jacobian_add(first, affine_to_jacobian(second, params), params)


def jacobian_negate(point: ProjectivePoint, params: CurveParameters) -> ProjectivePoint:
    """Return ``-point`` in Jacobian coordinates."""
    f = _Arith(params.prime_data)
    if _at_infinity(point, f):
        return _identity(f)
    return ProjectivePoint(point.x, f.neg(point.y), point.z, False)


def multiply_l2r(point: AffinePoint, scalar: int, params: CurveParameters) -> AffinePoint:
    """Return ``scalar * point`` by left-to-right double-and-add."""
    _check_scalar(scalar)
    result = _identity(_Arith(params.prime_data))
    for bit in reversed(range(scalar.bit_length())):
        result = jacobian_double(result, params)
        if (scalar >> bit) & 1:
            result = jacobian_add_affine(result, point, params)
    return jacobian_to_affine(result, params)


def multiply_r2l(point: AffinePoint, scalar: int, params: CurveParameters) -> AffinePoint:
    """Return ``scalar * point`` by right-to-left double-and-add."""
    _check_scalar(scalar)
    result = _identity(_Arith(params.prime_data))
    power = affine_to_jacobian(point, params)
    while scalar:
        if scalar & 1:
            result = jacobian_add(result, power, params)
        scalar >>= 1
        if scalar:
            power = jacobian_double(power, params)
    return jacobian_to_affine(result, params)


def _naf_digits(scalar: int) -> list[int]:
    """Non-adjacent form of ``scalar``, least significant digit first."""
    digits = []
    while scalar:
        if scalar & 1:
            digit = 2 - (scalar & 3)
            scalar -= digit
        else:
            digit = 0
        digits.append(digit)
        scalar >>= 1
    return digits


def multiply_naf(point: AffinePoint, scalar: int, params: CurveParameters) -> AffinePoint:
    """Return ``scalar * point`` by left-to-right double-and-add over the NAF."""
    _check_scalar(scalar)
    f = _Arith(params.prime_data)
    negated = point if point.identity else AffinePoint(point.x, f.neg(point.y), False)
    result = _identity(f)
    for digit in reversed(_naf_digits(scalar)):
        result = jacobian_double(result, params)
        if digit == 1:
            result = jacobian_add_affine(result, point, params)
        elif digit == -1:
            result = jacobian_add_affine(result, negated, params)
    return jacobian_to_affine(result, params)


# Standard projective coordinates


def affine_to_std_projective(point: AffinePoint, params: CurveParameters) -> ProjectivePoint:
    """Convert an affine point to standard projective coordinates with Z = 1."""
    return _lift(point, _Arith(params.prime_data))


def std_projective_to_affine(point: ProjectivePoint, params: CurveParameters) -> AffinePoint:
    """Convert a standard projective point to affine coordinates."""
    f = _Arith(params.prime_data)
    if _at_infinity(point, f):
        return _AFFINE_IDENTITY
    z_inv = f.inv(point.z)
    return AffinePoint(f.mul(point.x, z_inv), f.mul(point.y, z_inv), False)


def std_projective_is_valid(point: ProjectivePoint, params: CurveParameters) -> bool:
    """Tell whether the point is the identity or lies on the curve.

    Checks Y^2 Z = X^3 + a X Z^2 + b Z^3.
    """
    f = _Arith(params.prime_data)
    if _at_infinity(point, f):
        return True
    z2 = f.mul(point.z, point.z)
    z3 = f.mul(z2, point.z)
    left = f.mul(f.mul(point.y, point.y), point.z)
    x3 = f.mul(f.mul(point.x, point.x), point.x)
    right = f.add(
        f.add(x3, f.mul(params.param_a, f.mul(point.x, z2))),
        f.mul(params.param_b, z3),
    )
    return left == right


def std_projective_equals(
    first: ProjectivePoint, second: ProjectivePoint, params: CurveParameters
) -> bool:
    """Tell whether two standard projective points represent the same point."""
    f = _Arith(params.prime_data)
    first_inf, second_inf = _at_infinity(first, f), _at_infinity(second, f)
    if first_inf or second_inf:
        return first_inf and second_inf
    return (
        f.mul(first.x, second.z) == f.mul(second.x, first.z)
        and f.mul(first.y, second.z) == f.mul(second.y, first.z)
    )


def std_projective_negate(point: ProjectivePoint, params: CurveParameters) -> ProjectivePoint:
    """Return ``-point`` in standard projective coordinates."""
    f = _Arith(params.prime_data)
    if _at_infinity(point, f):
        return _identity(f)
    return ProjectivePoint(point.x, f.neg(point.y), point.z, False)