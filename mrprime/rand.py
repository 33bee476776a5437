# Word sources feeding the random witness draws.
# A word source is any zero-argument callable returning a 32-bit unsigned int.

from __future__ import annotations
import random, secrets
from typing import Callable

import gmpy2

WordSource = Callable[[], int]

WORD_BITS = 32
SEED_WORDS = 4  # 128-bit seed per draw


def fast_words() -> int:
    # not cryptographic
    return random.getrandbits(WORD_BITS)


def secure_words() -> int:
    return secrets.randbits(WORD_BITS)


def seeded_words(seed: int | None = None) -> WordSource:
    """Reproducible source backed by its own ``random.Random``."""
    rng = random.Random(seed)
    return lambda: rng.getrandbits(WORD_BITS)


def random_below(bound, words: WordSource = fast_words):
    """Uniform mpz in [0, bound), from a GMP state seeded fresh by ``words``."""
    if bound <= 0:
        raise ValueError("bound must be positive")
    seed = 0
    for _ in range(SEED_WORDS):
        seed = (seed << WORD_BITS) | (int(words()) & 0xFFFFFFFF)
    state = gmpy2.random_state(seed)
    return gmpy2.mpz_random(state, gmpy2.mpz(bound))
