"""Generalized Speck variant with arbitrary word width.

Word width, round count and both rotation amounts are free parameters, and
the key is a list of words consumed cyclically. With 16-bit words, 22 rounds,
rotations 7/2 and four key words it matches Speck32/64; other settings are
not Speck and do not interoperate with :class:`speckcipher.cipher.speck.Speck`.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .rounds import round_forward, round_inverse


@dataclass(frozen=True)
class SpeckV1:
    bits: int = 16
    rounds: int = 22
    right_rotations: int = 7
    left_rotations: int = 2

    def __post_init__(self) -> None:
        if self.bits < 2:
            raise ValueError("bits must be at least 2")
        if self.rounds < 1:
            raise ValueError("rounds must be at least 1")
        for name in ("right_rotations", "left_rotations"):
            r = getattr(self, name)
            if not 0 < r < self.bits:
                raise ValueError(f"{name} must be between 1 and {self.bits - 1}")

    @property
    def bit_max(self) -> int:
        return 1 << self.bits

    @property
    def bit_mask(self) -> int:
        return self.bit_max - 1

    @property
    def block_size(self) -> int:
        return 2 * self.bits

    def round(self, x: int, y: int, k: int) -> Tuple[int, int]:
        return round_forward(
            x, y, k,
            word_size=self.bits,
            alpha=self.right_rotations,
            beta=self.left_rotations,
        )

    def round_reverse(self, x: int, y: int, k: int) -> Tuple[int, int]:
        return round_inverse(
            x, y, k,
            word_size=self.bits,
            alpha=self.right_rotations,
            beta=self.left_rotations,
        )

    def _prepare_keys(self, keys: Sequence[int]) -> Tuple[int, List[int]]:
        words = [int(k) & self.bit_mask for k in keys]
        if len(words) < 2:
            raise ValueError("keys must contain at least two words")
        return words[0], words[1:]

    # ------------------------------------------------------------------
    # Word pairs: (high, low)
    # ------------------------------------------------------------------

    def encrypt_raw(self, plain_words: Sequence[int], keys: Sequence[int]) -> Tuple[int, int]:
        y, x = (int(w) & self.bit_mask for w in plain_words)
        b, a = self._prepare_keys(keys)

        x, y = self.round(x, y, b)
        for i in range(self.rounds - 1):
            j = i % len(a)
            a[j], b = self.round(a[j], b, i)
            x, y = self.round(x, y, b)

        return y, x

    def decrypt_raw(self, cipher_words: Sequence[int], keys: Sequence[int]) -> Tuple[int, int]:
        y, x = (int(w) & self.bit_mask for w in cipher_words)
        b, a = self._prepare_keys(keys)

        # Run the schedule forward to the key used by the last round.
        for i in range(self.rounds - 1):
            j = i % len(a)
            a[j], b = self.round(a[j], b, i)

        for i in reversed(range(self.rounds - 1)):
            x, y = self.round_reverse(x, y, b)
            j = i % len(a)
            a[j], b = self.round_reverse(a[j], b, i)
        x, y = self.round_reverse(x, y, b)

        return y, x

    # ------------------------------------------------------------------
    # Integers
    # ------------------------------------------------------------------

    def _split(self, value: int) -> Tuple[int, int]:
        value = int(value)
        return (value >> self.bits) & self.bit_mask, value & self.bit_mask

    def encrypt(self, value: int, keys: Sequence[int]) -> int:
        high, low = self.encrypt_raw(self._split(value), keys)
        return high * self.bit_max + low

    def decrypt(self, value: int, keys: Sequence[int]) -> int:
        high, low = self.decrypt_raw(self._split(value), keys)
        return high * self.bit_max + low

    def with_keys(self, keys: Sequence[int]) -> "KeyedSpeckV1":
        self._prepare_keys(keys)
        return KeyedSpeckV1(cipher=self, keys=tuple(int(k) for k in keys))


@dataclass(frozen=True)
class KeyedSpeckV1:
    """A :class:`SpeckV1` with its key words fixed."""

    cipher: SpeckV1
    keys: Tuple[int, ...]

    @property
    def block_size(self) -> int:
        return self.cipher.block_size

    def encrypt(self, plaintext: int) -> int:
        return self.cipher.encrypt(plaintext, self.keys)

    def decrypt(self, ciphertext: int) -> int:
        return self.cipher.decrypt(ciphertext, self.keys)
