"""Speck block cipher engine and its generalized variant.

Research / education only. Do NOT use in production.
"""

from .base import BlockCipher
from .errors import InvalidBlockSizeError, InvalidKeySizeError, SpeckError
from .key_schedule import expand_key, split_key
from .rounds import rotate_left, rotate_right, round_forward, round_inverse
from .setups import VALID_MODES, VALID_SETUPS, CipherConfig, iter_setups, resolve_config
from .speck import Speck, new
from .speck_v1 import KeyedSpeckV1, SpeckV1

__all__ = [
    "BlockCipher",
    "CipherConfig",
    "InvalidBlockSizeError",
    "InvalidKeySizeError",
    "KeyedSpeckV1",
    "Speck",
    "SpeckError",
    "SpeckV1",
    "VALID_MODES",
    "VALID_SETUPS",
    "expand_key",
    "iter_setups",
    "new",
    "resolve_config",
    "rotate_left",
    "rotate_right",
    "round_forward",
    "round_inverse",
    "split_key",
]
