from __future__ import annotations

from typing import Iterable, List


class SpeckError(ValueError):
    """Base class for Speck configuration errors."""


class InvalidBlockSizeError(SpeckError):
    def __init__(self, block_size: int, valid_block_sizes: Iterable[int]):
        self.block_size = block_size
        self.valid_block_sizes: List[int] = list(valid_block_sizes)
        super().__init__(
            "Invalid block size. "
            "Please use one of the following available block sizes: "
            + ", ".join(str(b) for b in self.valid_block_sizes)
        )


class InvalidKeySizeError(SpeckError):
    def __init__(self, key_size: int, block_size: int, valid_key_sizes: Iterable[int]):
        self.key_size = key_size
        self.block_size = block_size
        self.valid_key_sizes: List[int] = list(valid_key_sizes)
        super().__init__(
            "Invalid key size for selected block size. "
            "Please use one of the following available key sizes: "
            + ", ".join(str(k) for k in self.valid_key_sizes)
        )
