# mrprime/miller_rabin.py
# Miller-Rabin probable-prime test on GMP integers (gmpy2)
# - n-1 = d * 2^r decomposition
# - one strong round per witness
# - fixed bases below 2^64 (exact), k random bases above
# - witnesses raced through exec_tools.any_match

from __future__ import annotations
import contextlib
import logging
from functools import partial
from typing import List, Tuple

import gmpy2

from .config import get_settings
from .exec_tools import any_match
from .rand import WordSource, fast_words, random_below

log = logging.getLogger(__name__)

# Largest value of a 64-bit unsigned word. Up to here the bases below are a proven
# deterministic witness set; changing either one needs a new proof.
DETERMINISTIC_LIMIT = gmpy2.mpz(0xFFFF_FFFF_FFFF_FFFF)
SMALL_PRIME_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)

DEFAULT_ROUNDS = 16

# ---------- Decomposition ----------

def decompose(n) -> Tuple[gmpy2.mpz, int]:
    """Factor powers of two out of n-1. Returns (d, r) with n-1 == d * 2**r, d odd."""
    d = gmpy2.mpz(n) - 1
    if d < 1:
        raise ValueError(f"n must be >= 2 to decompose, got {n}")
    r = 0
    while gmpy2.is_even(d):
        d >>= 1
        r += 1
    return d, r

# ---------- One round ----------

def is_witness(a, n, d, r: int) -> bool:
    """True if base a proves n composite, False if n passes this round."""
    n_minus_one = n - 1
    x = gmpy2.powmod(a, d, n)
    if x == 1 or x == n_minus_one:
        return False
    for _ in range(r - 1):
        x = gmpy2.powmod(x, 2, n)
        if x == n_minus_one:
            return False
    return True


def _round(n, d, r, release_gil, a) -> bool:
    ctx = gmpy2.context(allow_release_gil=True) if release_gil else contextlib.nullcontext()
    with ctx:
        return is_witness(a, n, d, r)

# ---------- Witness selection ----------

def witnesses(n, k: int = DEFAULT_ROUNDS, words: WordSource = fast_words) -> List[gmpy2.mpz]:
    """
    Bases to try against n.
    n <= DETERMINISTIC_LIMIT: the small prime bases below n-1 (k unused).
    Otherwise: k independent uniform draws from [2, n-2].
    """
    n = gmpy2.mpz(n)
    n_minus_one = n - 1
    if n <= DETERMINISTIC_LIMIT:
        return [gmpy2.mpz(p) for p in SMALL_PRIME_BASES if p < n_minus_one]

    if k < 1:
        raise ValueError(f"k must be >= 1 above 2^64, got {k}")
    samples: List[gmpy2.mpz] = []
    while len(samples) < k:
        a = random_below(n - 3, words) + 2
        if a < n_minus_one:
            samples.append(a)
    return samples

# ---------- Public test ----------

def is_prime(n, k: int = DEFAULT_ROUNDS, *, parallel: bool | None = None,
             words: WordSource | None = None, max_workers: int | None = None) -> bool:
    """
    Miller-Rabin test. True means probably prime (exact for n <= 2^64-1),
    False means n is definitely composite. A composite passes the k random
    rounds with probability at most 4^-k.
    """
    if isinstance(n, bool) or not isinstance(n, (int, gmpy2.mpz)):
        raise TypeError(f"n must be an integer, got {type(n).__name__}")
    n = gmpy2.mpz(n)

    if n <= 1:
        return False
    if n <= 3:
        return True
    if gmpy2.is_even(n):
        return False

    settings = get_settings()
    if parallel is None:
        parallel = settings.parallel
    if max_workers is None:
        max_workers = settings.workers

    d, r = decompose(n)
    bases = witnesses(n, k, words or fast_words)
    exact = n <= DETERMINISTIC_LIMIT
    log.debug("testing %d-bit n: r=%d, %d %s witnesses, parallel=%s",
              n.bit_length(), r, len(bases), "fixed" if exact else "random", parallel)

    composite = any_match(partial(_round, n, d, r, settings.release_gil), bases,
                          parallel=parallel, max_workers=max_workers)
    log.debug("verdict: %s", "composite" if composite else "probably prime")
    return not composite
