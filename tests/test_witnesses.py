import pytest

from mrprime import DETERMINISTIC_LIMIT, SMALL_PRIME_BASES, witnesses
from mrprime.rand import fast_words, random_below, secure_words, seeded_words

BIG = 2**127 - 1


def test_deterministic_limit_is_u64_max():
    assert DETERMINISTIC_LIMIT == 2**64 - 1
    assert SMALL_PRIME_BASES == (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


@pytest.mark.parametrize("n,expected", [
    (4, [2]),
    (5, [2, 3]),
    (13, [2, 3, 5, 7, 11]),
    (39, [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37]),
    (38, [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31]),
])
def test_bounded_bases_filtered_below_n_minus_one(n, expected):
    assert witnesses(n, 16) == expected


def test_bounded_ignores_k():
    n = 2**64 - 59
    assert witnesses(n, 0) == list(SMALL_PRIME_BASES)
    assert witnesses(n, 1000) == list(SMALL_PRIME_BASES)
    assert witnesses(DETERMINISTIC_LIMIT, 3) == list(SMALL_PRIME_BASES)


@pytest.mark.parametrize("k", [1, 16, 64])
def test_unbounded_draws_k_bases_in_range(k):
    n = DETERMINISTIC_LIMIT + 2
    bases = witnesses(n, k, seeded_words(k))
    assert len(bases) == k
    assert all(2 <= a < n - 1 for a in bases)


def test_unbounded_seeded_is_reproducible():
    assert witnesses(BIG, 16, seeded_words(7)) == witnesses(BIG, 16, seeded_words(7))
    assert witnesses(BIG, 16, seeded_words(7)) != witnesses(BIG, 16, seeded_words(8))


def test_unbounded_draws_vary():
    bases = witnesses(BIG, 32)
    assert len(set(bases)) > 1


def test_unbounded_rejects_zero_rounds():
    with pytest.raises(ValueError):
        witnesses(BIG, 0)


def test_random_below_bounds():
    words = seeded_words(1)
    assert all(random_below(1, words) == 0 for _ in range(20))
    assert all(0 <= random_below(10, words) < 10 for _ in range(200))
    assert len({int(random_below(10, words)) for _ in range(500)}) == 10


@pytest.mark.parametrize("bound", [0, -5])
def test_random_below_rejects_empty_range(bound):
    with pytest.raises(ValueError):
        random_below(bound)


def test_word_sources_are_32_bit():
    for source in (fast_words, secure_words, seeded_words(3)):
        for _ in range(50):
            assert 0 <= source() < 2**32
