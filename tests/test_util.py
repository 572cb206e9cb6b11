import math
import random

import pytest

from sptile.util import (
    RAND_IDX_MAX,
    argmax_elem,
    argmin_elem,
    bytes_str,
    fill_rand,
    get_primes,
    rand_idx,
    rand_val,
)


def test_rand_val_in_range_and_reproducible():
    a = random.Random(42)
    b = random.Random(42)
    for _ in range(200):
        v = rand_val(a)
        assert -3.0 <= v <= 3.0
        assert v == rand_val(b)


def test_rand_val_takes_both_signs():
    rng = random.Random(7)
    values = [rand_val(rng) for _ in range(200)]
    assert any(v < 0 for v in values)
    assert any(v > 0 for v in values)


def test_rand_idx_in_range():
    rng = random.Random(3)
    for _ in range(500):
        assert 0 <= rand_idx(rng) <= RAND_IDX_MAX


def test_fill_rand_length_and_seed():
    first = fill_rand(50, random.Random(9))
    second = fill_rand(50, random.Random(9))
    assert len(first) == 50
    assert first == second
    assert all(-3.0 <= v <= 3.0 for v in first)


def test_fill_rand_negative():
    with pytest.raises(ValueError):
        fill_rand(-1, random.Random(0))


def test_bytes_str_small_and_kilobytes():
    assert bytes_str(0) == "0.00B"
    assert bytes_str(2048) == "2.00KB"


def test_bytes_str_exact_boundary_stays_lower_unit():
    assert bytes_str(1024).endswith("B")
    assert not bytes_str(1024).endswith("KB")


def test_bytes_str_caps_at_terabytes():
    assert bytes_str(1024 ** 6).endswith("TB")


def test_bytes_str_negative():
    with pytest.raises(ValueError):
        bytes_str(-5)


def test_argmax_first_occurrence():
    arr = [3, 9, 1, 9, 4]
    idx = argmax_elem(arr)
    assert arr[idx] == max(arr)
    assert all(v < arr[idx] for v in arr[:idx])


def test_argmin_first_occurrence():
    arr = [5, 2, 8, 2, 6]
    idx = argmin_elem(arr)
    assert arr[idx] == min(arr)
    assert all(v > arr[idx] for v in arr[:idx])


def test_arg_empty_raises():
    with pytest.raises(ValueError):
        argmax_elem([])
    with pytest.raises(ValueError):
        argmin_elem([])


@pytest.mark.parametrize("n", [2, 12, 97, 360, 1001, 65536, 999983 * 6])
def test_get_primes_product_and_order(n):
    primes = get_primes(n)
    assert math.prod(primes) == n
    assert primes == sorted(primes)
    for p in primes:
        assert get_primes(p) == [p]


def test_get_primes_one_is_empty():
    assert len(get_primes(1)) == 0


def test_get_primes_invalid():
    with pytest.raises(ValueError):
        get_primes(0)