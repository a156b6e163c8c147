from __future__ import annotations

from typing import List, Tuple

from .rounds import round_forward
from .setups import CipherConfig


def split_key(key: int, config: CipherConfig) -> List[int]:
    """Split a key into ``key_size / word_size`` words, lowest word first."""
    key &= config.key_mask
    return [
        (key >> (i * config.word_size)) & config.word_mask
        for i in range(config.key_words)
    ]


def expand_key(key: int, config: CipherConfig) -> Tuple[int, ...]:
    """Expand a key into one round key per round.

    The first key word seeds the round keys and the remaining words seed the
    auxiliary ``l`` sequence. Both advance together through the block round
    function, with ``l[i]`` as the upper word, ``k[i]`` as the lower word and
    the round index as the round key.
    """
    words = split_key(key, config)
    k: List[int] = [words[0]]
    l: List[int] = words[1:]

    for i in range(config.rounds - 1):
        new_l, new_k = round_forward(
            l[i],
            k[i],
            i,
            word_size=config.word_size,
            alpha=config.alpha_shift,
            beta=config.beta_shift,
        )
        l.append(new_l)
        k.append(new_k)

    return tuple(k)
