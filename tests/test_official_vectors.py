import sys
from pathlib import Path

import pytest

# Ensure project root is on path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from speckcipher import Speck


# (block_size, key_size, key, plaintext, ciphertext)
OFFICIAL_VECTORS = [
    (32, 64, 0x1918111009080100, 0x6574694C, 0xA86842F2),
    (48, 72, 0x1211100A0908020100, 0x20796C6C6172, 0xC049A5385ADC),
    (48, 96, 0x1A19181211100A0908020100, 0x6D2073696874, 0x735E10B6445D),
    (64, 96, 0x131211100B0A090803020100, 0x74614620736E6165, 0x9F7952EC4175946C),
    (64, 128, 0x1B1A1918131211100B0A090803020100, 0x3B7265747475432D, 0x8C6FA548454E028B),
    (96, 96, 0x0D0C0B0A0908050403020100, 0x65776F68202C656761737520, 0x9E4D09AB717862BDDE8F79AA),
    (96, 144, 0x1514131211100D0C0B0A0908050403020100, 0x656D6974206E69202C726576, 0x2BF31072228A7AE440252EE6),
    (128, 128, 0x0F0E0D0C0B0A09080706050403020100,
     0x6C617669757165207469206564616D20, 0xA65D9851797832657860FEDF5C570D18),
    (128, 192, 0x17161514131211100F0E0D0C0B0A09080706050403020100,
     0x726148206665696843206F7420746E65, 0x1BE4CF3A13135566F9BC185DE03C1886),
    (128, 256, 0x1F1E1D1C1B1A191817161514131211100F0E0D0C0B0A09080706050403020100,
     0x65736F6874206E49202E72656E6F6F70, 0x4109010405C0F53E4EEEB48D9C188F43),
]


@pytest.mark.parametrize(
    "block_size,key_size,key,plaintext,ciphertext",
    OFFICIAL_VECTORS,
    ids=[f"{b}/{k}" for b, k, *_ in OFFICIAL_VECTORS],
)
def test_official_vector(block_size, key_size, key, plaintext, ciphertext):
    cipher = Speck(key, key_size, block_size)
    assert cipher.encrypt(plaintext) == ciphertext
    assert cipher.decrypt(ciphertext) == plaintext


def test_default_setup_is_128_128():
    cipher = Speck(0x0F0E0D0C0B0A09080706050403020100)
    assert cipher.block_size == 128
    assert cipher.key_size == 128
    assert cipher.encrypt(0x6C617669757165207469206564616D20) == 0xA65D9851797832657860FEDF5C570D18


def test_encrypt_block_bytes_match_integer_vector():
    cipher = Speck(0x1B1A1918131211100B0A090803020100, 128, 64)
    block = bytes.fromhex("3b7265747475432d")
    ct = cipher.encrypt_block(block)
    assert ct == bytes.fromhex("8c6fa548454e028b")
    assert cipher.decrypt_block(ct) == block


def test_encrypt_block_rejects_wrong_length():
    cipher = Speck(0, 64, 32)
    with pytest.raises(ValueError, match="4 bytes"):
        cipher.encrypt_block(b"\x00" * 5)
    with pytest.raises(ValueError, match="4 bytes"):
        cipher.decrypt_block(b"")
