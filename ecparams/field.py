"""Arithmetic in GF(p), in plain and in Montgomery representation.

Field elements are Python integers in the range ``[0, prime)``. Elements in
Montgomery representation stand for ``a * R mod prime``, where
``R = 1 << (words * 32)`` and ``words`` is taken from the prime data.
"""

from __future__ import annotations

from ecparams.types import BITS_PER_WORD, UINT_T_MAX, PrimeData, words_per_bits


def _check_modulus(prime: int) -> None:
    if prime <= 1:
        raise ValueError(f"modulus must be greater than one, not {prime!r}")


def _check_odd(prime: int) -> None:
    _check_modulus(prime)
    if prime % 2 == 0:
        raise ValueError("modulus must be odd")


def compute_r(prime: int, words: int) -> int:
    """Return ``R mod prime`` with ``R = 1 << (words * 32)``, the Montgomery one."""
    _check_modulus(prime)
    if words < 1:
        raise ValueError("words must be at least one")
    return (1 << (BITS_PER_WORD * words)) % prime


def compute_r_squared(prime: int, words: int) -> int:
    """Return ``R^2 mod prime``, used to convert into Montgomery form."""
    _check_modulus(prime)
    if words < 1:
        raise ValueError("words must be at least one")
    return (1 << (2 * BITS_PER_WORD * words)) % prime


def compute_n0(prime: int) -> int:
    """Return ``-prime^-1 mod 2^32``, the word constant of Montgomery reduction."""
    _check_odd(prime)
    return (-pow(prime, -1, 1 << BITS_PER_WORD)) & UINT_T_MAX


def make_prime_data(prime: int, bits: int, montgomery_domain: bool = False) -> PrimeData:
    """Build prime data with all Montgomery constants for an odd modulus."""
    _check_odd(prime)
    if bits < 1 or prime.bit_length() > bits:
        raise ValueError(f"prime does not fit into {bits} bits")
    words = words_per_bits(bits)
    return PrimeData(
        prime=prime,
        bits=bits,
        words=words,
        montgomery_domain=bool(montgomery_domain),
        n0=compute_n0(prime),
        r_squared=compute_r_squared(prime, words),
        gfp_one=compute_r(prime, words),
    )


def add(a: int, b: int, prime_data: PrimeData) -> int:
    """Return ``a + b mod prime``."""
    return (a + b) % prime_data.prime


def subtract(a: int, b: int, prime_data: PrimeData) -> int:
    """Return ``a - b mod prime``."""
    return (a - b) % prime_data.prime


def halve(a: int, prime_data: PrimeData) -> int:
    """Return ``a / 2 mod prime`` for an odd prime."""
    prime = prime_data.prime
    _check_odd(prime)
    a %= prime
    return (a + prime) >> 1 if a & 1 else a >> 1


def negate(a: int, prime_data: PrimeData) -> int:
    """Return ``-a mod prime``."""
    return (-a) % prime_data.prime


def reduce(a: int, prime_data: PrimeData) -> int:
    """Return ``a mod prime``."""
    return a % prime_data.prime


def multiply_div(a: int, b: int, prime_data: PrimeData) -> int:
    """Return ``a * b mod prime`` by plain multiplication and division."""
    return (a * b) % prime_data.prime


def binary_euclidean_inverse(a: int, prime_data: PrimeData) -> int:
    """Return ``a^-1 mod prime`` using the binary extended Euclidean algorithm."""
    prime = prime_data.prime
    _check_odd(prime)
    u = a % prime
    if u == 0:
        raise ZeroDivisionError("zero has no inverse")
    v = prime
    x1, x2 = 1, 0
    while u != 1 and v != 1:
        while u % 2 == 0:
            u >>= 1
            x1 = x1 >> 1 if x1 % 2 == 0 else (x1 + prime) >> 1
        while v % 2 == 0:
            v >>= 1
            x2 = x2 >> 1 if x2 % 2 == 0 else (x2 + prime) >> 1
        if u >= v:
            u -= v
            x1 = (x1 - x2) % prime
        else:
            v -= u
            x2 = (x2 - x1) % prime
        if u == 0 or v == 0:
            raise ZeroDivisionError(f"{a} is not invertible modulo {prime}")
    return (x1 if u == 1 else x2) % prime


def _redc(t: int, prime_data: PrimeData) -> int:
    """Word-by-word Montgomery reduction: ``t * R^-1 mod prime``."""
    prime = prime_data.prime
    if prime_data.words < 1:
        raise ValueError("prime data must span at least one word")
    n0 = prime_data.n0 if prime_data.n0 else compute_n0(prime)
    for _ in range(prime_data.words):
        m = ((t & UINT_T_MAX) * n0) & UINT_T_MAX
        t = (t + m * prime) >> BITS_PER_WORD
    return t - prime if t >= prime else t


def mont_multiply(a: int, b: int, prime_data: PrimeData) -> int:
    """Return the Montgomery product ``a * b * R^-1 mod prime``."""
    prime = prime_data.prime
    return _redc((a % prime) * (b % prime), prime_data)


def to_montgomery(a: int, prime_data: PrimeData) -> int:
    """Convert ``a`` into Montgomery form, ``a * R mod prime``."""
    r_squared = prime_data.r_squared or compute_r_squared(prime_data.prime, prime_data.words)
    return mont_multiply(a, r_squared, prime_data)


def from_montgomery(a: int, prime_data: PrimeData) -> int:
    """Convert ``a`` out of Montgomery form, ``a * R^-1 mod prime``."""
    return _redc(a % prime_data.prime, prime_data)


def mont_exponent(a: int, exponent: int, prime_data: PrimeData) -> int:
    """Raise a Montgomery-form element to a non-negative power; the result is in Montgomery form."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    result = prime_data.gfp_one or compute_r(prime_data.prime, prime_data.words)
    for bit in reversed(range(exponent.bit_length())):
        result = mont_multiply(result, result, prime_data)
        if (exponent >> bit) & 1:
            result = mont_multiply(result, a, prime_data)
    return result


def mont_inverse(a: int, prime_data: PrimeData) -> int:
    """Invert a Montgomery-form element via Fermat's little theorem."""
    prime = prime_data.prime
    normal = from_montgomery(a, prime_data)
    if normal == 0:
        raise ZeroDivisionError("zero has no inverse")
    return to_montgomery(pow(normal, prime - 2, prime), prime_data)