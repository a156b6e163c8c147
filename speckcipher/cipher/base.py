from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class BlockCipher(Protocol):
    """Anything that encrypts and decrypts one integer block under a bound key.

    Both cipher families satisfy this structurally; they share no base class
    because their key schedules and validation rules differ.
    """

    @property
    def block_size(self) -> int: ...

    def encrypt(self, plaintext: int) -> int: ...

    def decrypt(self, ciphertext: int) -> int: ...
