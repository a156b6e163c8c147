"""Rotations and the Speck round function.

All values are unsigned words of ``word_size`` bits held in Python ints;
every shift and addition is masked back to the word width.
"""

from __future__ import annotations

from typing import Tuple


def rotate_left(x: int, r: int, w: int) -> int:
    """Rotate-left x by r bits in a w-bit word."""
    mask = (1 << w) - 1
    r %= w
    x &= mask
    return ((x << r) & mask) | (x >> (w - r))


def rotate_right(x: int, r: int, w: int) -> int:
    """Rotate-right x by r bits in a w-bit word."""
    mask = (1 << w) - 1
    r %= w
    x &= mask
    return (x >> r) | ((x << (w - r)) & mask)


def round_forward(
    upper: int,
    lower: int,
    round_key: int,
    *,
    word_size: int,
    alpha: int,
    beta: int,
) -> Tuple[int, int]:
    """One Feistel step: returns the new (upper, lower) words."""
    mask = (1 << word_size) - 1
    upper = rotate_right(upper, alpha, word_size)
    upper = (upper + lower) & mask
    upper ^= round_key & mask
    lower = rotate_left(lower, beta, word_size)
    lower ^= upper
    return upper, lower


def round_inverse(
    upper: int,
    lower: int,
    round_key: int,
    *,
    word_size: int,
    alpha: int,
    beta: int,
) -> Tuple[int, int]:
    """Undo :func:`round_forward` given its output words and the same key."""
    modulus = 1 << word_size
    mask = modulus - 1
    lower = rotate_right((upper ^ lower) & mask, beta, word_size)
    upper = (upper ^ (round_key & mask)) & mask
    # Keep the difference non-negative before reducing.
    upper = ((upper - lower) + modulus) % modulus
    upper = rotate_left(upper, alpha, word_size)
    return upper, lower
