"""Supported Speck block/key sizes and the configuration derived from them."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .errors import InvalidBlockSizeError, InvalidKeySizeError


# block_size -> {key_size -> rounds}
VALID_SETUPS: Mapping[int, Mapping[int, int]] = MappingProxyType({
    32: MappingProxyType({64: 22}),
    48: MappingProxyType({72: 22, 96: 23}),
    64: MappingProxyType({96: 26, 128: 27}),
    96: MappingProxyType({96: 28, 144: 29}),
    128: MappingProxyType({128: 32, 192: 33, 256: 34}),
})

# Named for reference only; no mode of operation is implemented.
VALID_MODES: Tuple[str, ...] = ("ECB", "CTR", "CBC", "PCBC", "CFB", "OFB")


class CipherConfig(BaseModel):
    """Immutable parameters of one Speck block/key size pairing."""

    model_config = ConfigDict(frozen=True)

    block_size: int = Field(..., description="Block width in bits")
    key_size: int = Field(..., description="Key width in bits")
    word_size: int
    rounds: int = Field(..., ge=1)
    alpha_shift: int = Field(..., description="Right rotation of the upper word")
    beta_shift: int = Field(..., description="Left rotation of the lower word")

    @property
    def word_mask(self) -> int:
        return (1 << self.word_size) - 1

    @property
    def word_modulus(self) -> int:
        return 1 << self.word_size

    @property
    def key_mask(self) -> int:
        return (1 << self.key_size) - 1

    @property
    def block_mask(self) -> int:
        return (1 << self.block_size) - 1

    @property
    def key_words(self) -> int:
        return self.key_size // self.word_size

    @property
    def name(self) -> str:
        return f"Speck{self.block_size}/{self.key_size}"


def resolve_config(block_size: int, key_size: int) -> CipherConfig:
    """Validate a (block_size, key_size) pair and derive its parameters.

    Raises:
        InvalidBlockSizeError: block_size is not in VALID_SETUPS.
        InvalidKeySizeError: key_size is not valid for block_size.
    """
    if block_size not in VALID_SETUPS:
        raise InvalidBlockSizeError(block_size, VALID_SETUPS.keys())

    key_sizes = VALID_SETUPS[block_size]
    if key_size not in key_sizes:
        raise InvalidKeySizeError(key_size, block_size, key_sizes.keys())

    small = block_size == 32
    return CipherConfig(
        block_size=block_size,
        key_size=key_size,
        word_size=block_size >> 1,
        rounds=key_sizes[key_size],
        alpha_shift=7 if small else 8,
        beta_shift=2 if small else 3,
    )


def iter_setups() -> Iterator[Tuple[int, int]]:
    """Yield every supported (block_size, key_size) pair in table order."""
    for block_size, key_sizes in VALID_SETUPS.items():
        for key_size in key_sizes:
            yield block_size, key_size
