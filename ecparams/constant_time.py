"""Branch-free selection and comparison of word sequences.

Numbers are sequences of 32-bit words. The operations use masks rather than
data-dependent branches, mirroring constant-time big-integer routines.
"""

from __future__ import annotations

from typing import Sequence

from ecparams.types import UINT_T_MAX


def _mask(condition: int) -> int:
    if condition not in (0, 1):
        raise ValueError(f"condition must be 0 or 1, not {condition!r}")
    return (-int(condition)) & UINT_T_MAX


def _check_lengths(first: Sequence[int], second: Sequence[int]) -> None:
    if not first:
        raise ValueError("big integers must hold at least one word")
    if len(first) != len(second):
        raise ValueError("big integers must have the same length")


def cr_switch(
    first: Sequence[int], second: Sequence[int], condition: int
) -> tuple[list[int], list[int]]:
    """Return the two numbers swapped when ``condition`` is 1, unchanged when 0."""
    _check_lengths(first, second)
    mask = _mask(condition)
    new_first, new_second = [], []
    for a, b in zip(first, second):
        delta = (a ^ b) & mask
        new_first.append(a ^ delta)
        new_second.append(b ^ delta)
    return new_first, new_second


def cr_select(var0: Sequence[int], var1: Sequence[int], condition: int) -> list[int]:
    """Return a copy of ``var0`` when ``condition`` is 0, of ``var1`` when it is 1."""
    _check_lengths(var0, var1)
    mask = _mask(condition)
    return [(a & ~mask & UINT_T_MAX) | (b & mask) for a, b in zip(var0, var1)]


def cr_is_equal(first: Sequence[int], second: Sequence[int]) -> bool:
    """Tell whether two numbers of equal length hold the same words."""
    _check_lengths(first, second)
    difference = 0
    for a, b in zip(first, second):
        difference |= a ^ b
    return difference == 0


def cr_is_zero(value: Sequence[int]) -> bool:
    """Tell whether every word of ``value`` is zero."""
    if not value:
        raise ValueError("big integers must hold at least one word")
    accumulated = 0
    for word in value:
        accumulated |= word
    return accumulated == 0