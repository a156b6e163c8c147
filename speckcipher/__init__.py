"""speckcipher: the Speck lightweight block cipher family.

Research / education only. Do NOT use in production.
"""

from .cipher import (
    VALID_SETUPS,
    BlockCipher,
    CipherConfig,
    InvalidBlockSizeError,
    InvalidKeySizeError,
    KeyedSpeckV1,
    Speck,
    SpeckError,
    SpeckV1,
    new,
)

__version__ = "0.1.0"

__all__ = [
    "VALID_SETUPS",
    "BlockCipher",
    "CipherConfig",
    "InvalidBlockSizeError",
    "InvalidKeySizeError",
    "KeyedSpeckV1",
    "Speck",
    "SpeckError",
    "SpeckV1",
    "new",
]
