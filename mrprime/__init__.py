from .miller_rabin import (
    DETERMINISTIC_LIMIT,
    SMALL_PRIME_BASES,
    decompose,
    is_prime,
    is_witness,
    witnesses,
)
from .exec_tools import any_match
__all__ = ["DETERMINISTIC_LIMIT", "SMALL_PRIME_BASES", "any_match", "decompose",
           "is_prime", "is_witness", "witnesses"]
