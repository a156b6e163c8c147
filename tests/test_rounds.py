import sys
from pathlib import Path

import pytest

# Ensure project root is on path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import random

from speckcipher.cipher.key_schedule import expand_key, split_key
from speckcipher.cipher.rounds import rotate_left, rotate_right, round_forward, round_inverse
from speckcipher.cipher.setups import resolve_config


def test_rotations_16_bit():
    assert rotate_right(0x0001, 7, 16) == 0x0200
    assert rotate_left(0x8000, 2, 16) == 0x0002
    assert rotate_left(0x1234, 0, 16) == 0x1234


@pytest.mark.parametrize("width", [8, 10, 15, 24, 48])
def test_rotations_invert_for_any_width(width):
    rng = random.Random(width)
    for _ in range(200):
        x = rng.getrandbits(width)
        r = rng.randrange(0, width)
        y = rotate_left(x, r, width)
        assert y < (1 << width)
        assert rotate_right(y, r, width) == x


def test_rotate_24_bit_wraps_high_bit():
    # 24 is not a power of two; the rotation must still wrap at bit 23.
    assert rotate_left(0x800000, 3, 24) == 0x000004
    assert rotate_right(0x000001, 8, 24) == 0x010000


@pytest.mark.parametrize("word_size,alpha,beta", [(16, 7, 2), (24, 8, 3), (32, 8, 3), (48, 8, 3), (64, 8, 3)])
def test_round_inverse_undoes_forward(word_size, alpha, beta):
    rng = random.Random(word_size)
    opts = {"word_size": word_size, "alpha": alpha, "beta": beta}
    for _ in range(500):
        x, y, k = (rng.getrandbits(word_size) for _ in range(3))
        fx, fy = round_forward(x, y, k, **opts)
        assert fx < (1 << word_size) and fy < (1 << word_size)
        assert round_inverse(fx, fy, k, **opts) == (x, y)


def test_round_forward_known_step():
    # First Speck32/64 round: pt (0x6574, 0x694c), k0 = 0x0100.
    x = rotate_right(0x6574, 7, 16)
    x = (x + 0x694C) & 0xFFFF
    x ^= 0x0100
    y = rotate_left(0x694C, 2, 16) ^ x
    assert round_forward(0x6574, 0x694C, 0x0100, word_size=16, alpha=7, beta=2) == (x, y)


def test_round_inverse_handles_wraparound_subtraction():
    # (upper ^ key) < lower forces a negative intermediate difference.
    opts = {"word_size": 16, "alpha": 7, "beta": 2}
    fx, fy = round_forward(0x0000, 0xFFFF, 0x0000, **opts)
    assert round_inverse(fx, fy, 0x0000, **opts) == (0x0000, 0xFFFF)


# ---------------------------------------------------------------------------
# Key schedule
# ---------------------------------------------------------------------------

def test_split_key_little_endian_words():
    cfg = resolve_config(32, 64)
    assert split_key(0x1918111009080100, cfg) == [0x0100, 0x0908, 0x1110, 0x1918]


def test_schedule_speck32_64_first_keys():
    cfg = resolve_config(32, 64)
    ks = expand_key(0x1918111009080100, cfg)
    assert len(ks) == 22
    assert ks[0] == 0x0100
    l1, k1 = round_forward(0x0908, 0x0100, 0, word_size=16, alpha=7, beta=2)
    assert ks[1] == k1


@pytest.mark.parametrize("block_size,key_size", [(32, 64), (48, 72), (96, 144), (128, 256)])
def test_schedule_length_equals_rounds(block_size, key_size):
    cfg = resolve_config(block_size, key_size)
    ks = expand_key((1 << key_size) - 1, cfg)
    assert isinstance(ks, tuple)
    assert len(ks) == cfg.rounds
    assert all(0 <= k <= cfg.word_mask for k in ks)


def test_schedule_masks_wide_key():
    cfg = resolve_config(64, 96)
    key = 0x131211100B0A090803020100
    assert expand_key(key | (0xFF << 96), cfg) == expand_key(key, cfg)
