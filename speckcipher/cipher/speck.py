"""The Speck block cipher over the NSA block/key size table.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import logging
from typing import Tuple

from .key_schedule import expand_key
from .rounds import round_forward, round_inverse
from .setups import CipherConfig, resolve_config

logger = logging.getLogger(__name__)


class Speck:
    """A Speck cipher bound to one key.

    Configuration is validated and the key schedule expanded once, in the
    constructor. Instances are never mutated afterwards, so one instance may
    serve concurrent encrypt/decrypt calls.

    Args:
        key: Integer key. Bits above ``key_size`` are discarded.
        key_size: Key width in bits; must be valid for ``block_size``.
        block_size: Block width in bits (32, 48, 64, 96 or 128).

    Raises:
        InvalidBlockSizeError: Unsupported block size.
        InvalidKeySizeError: Key size not supported for the block size.
    """

    def __init__(self, key: int, key_size: int = 128, block_size: int = 128):
        self._config: CipherConfig = resolve_config(block_size, key_size)
        self._key: int = int(key) & self._config.key_mask
        self._key_schedule: Tuple[int, ...] = expand_key(self._key, self._config)
        logger.debug(
            "Built %s with %d rounds", self._config.name, self._config.rounds
        )

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------

    @property
    def config(self) -> CipherConfig:
        return self._config

    @property
    def key(self) -> int:
        return self._key

    @property
    def key_size(self) -> int:
        return self._config.key_size

    @property
    def block_size(self) -> int:
        return self._config.block_size

    @property
    def word_size(self) -> int:
        return self._config.word_size

    @property
    def rounds(self) -> int:
        return self._config.rounds

    @property
    def key_schedule(self) -> Tuple[int, ...]:
        return self._key_schedule

    def __repr__(self) -> str:
        return f"Speck(block_size={self.block_size}, key_size={self.key_size})"

    # ------------------------------------------------------------------
    # Integer blocks
    # ------------------------------------------------------------------

    def _split(self, block: int) -> Tuple[int, int]:
        cfg = self._config
        return (block >> cfg.word_size) & cfg.word_mask, block & cfg.word_mask

    def _join(self, upper: int, lower: int) -> int:
        return (upper << self._config.word_size) | lower

    def encrypt(self, plaintext: int) -> int:
        """Encrypt one block given as an unsigned integer."""
        cfg = self._config
        upper, lower = self._split(int(plaintext))
        for round_key in self._key_schedule:
            upper, lower = round_forward(
                upper,
                lower,
                round_key,
                word_size=cfg.word_size,
                alpha=cfg.alpha_shift,
                beta=cfg.beta_shift,
            )
        return self._join(upper, lower)

    def decrypt(self, ciphertext: int) -> int:
        """Decrypt one block given as an unsigned integer."""
        cfg = self._config
        upper, lower = self._split(int(ciphertext))
        for round_key in reversed(self._key_schedule):
            upper, lower = round_inverse(
                upper,
                lower,
                round_key,
                word_size=cfg.word_size,
                alpha=cfg.alpha_shift,
                beta=cfg.beta_shift,
            )
        return self._join(upper, lower)

    # ------------------------------------------------------------------
    # Byte blocks (single block, big-endian; not a mode of operation)
    # ------------------------------------------------------------------

    @property
    def block_bytes(self) -> int:
        return self._config.block_size // 8

    def _check_block(self, block: bytes, what: str) -> int:
        bs = self.block_bytes
        if len(block) != bs:
            raise ValueError(f"{what} block must be {bs} bytes")
        return int.from_bytes(block, "big")

    def encrypt_block(self, plaintext_block: bytes) -> bytes:
        value = self._check_block(plaintext_block, "Plaintext")
        return self.encrypt(value).to_bytes(self.block_bytes, "big")

    def decrypt_block(self, ciphertext_block: bytes) -> bytes:
        value = self._check_block(ciphertext_block, "Ciphertext")
        return self.decrypt(value).to_bytes(self.block_bytes, "big")


def new(key: int, key_size: int = 128, block_size: int = 128) -> Speck:
    """Construct a :class:`Speck` instance."""
    return Speck(key, key_size=key_size, block_size=block_size)
