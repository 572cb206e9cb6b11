"""Random values, human-readable sizes and small numeric helpers."""

from __future__ import annotations

import random
from collections.abc import Sequence

RAND_MAX = (1 << 31) - 1
RAND_IDX_MAX = (RAND_MAX << 16) | RAND_MAX

_SUFFIXES = ("B", "KB", "MB", "GB", "TB")


def _source(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random._inst  # shared module generator


def rand_val(rng: random.Random | None = None) -> float:
    """Return a pseudo-random value in [-3, 3]."""
    gen = _source(rng)
    value = 3.0 * (gen.randint(0, RAND_MAX) / RAND_MAX)
    if gen.randint(0, RAND_MAX) % 2 == 0:
        value = -value
    return value


def rand_idx(rng: random.Random | None = None) -> int:
    """Return a pseudo-random index in [0, RAND_MAX << 16 | RAND_MAX]."""
    gen = _source(rng)
    high = gen.randint(0, RAND_MAX)
    low = gen.randint(0, RAND_MAX)
    return (high << 16) | low


def fill_rand(nelems: int, rng: random.Random | None = None) -> list[float]:
    """Return a list of ``nelems`` random values from :func:`rand_val`."""
    if nelems < 0:
        raise ValueError("nelems must be non-negative")
    return [rand_val(rng) for _ in range(nelems)]


def bytes_str(nbytes: int) -> str:
    """Describe a number of bytes in human-readable form, e.g. '2.00KB'."""
    if nbytes < 0:
        raise ValueError("byte count must be non-negative")
    size = float(nbytes)
    suffix = 0
    while size > 1024 and suffix < len(_SUFFIXES) - 1:
        size /= 1024.0
        suffix += 1
    return f"{size:0.2f}{_SUFFIXES[suffix]}"


def argmax_elem(arr: Sequence[int]) -> int:
    """Return the index of the first largest element."""
    if not arr:
        raise ValueError("argmax_elem() of an empty sequence")
    return max(range(len(arr)), key=arr.__getitem__)


def argmin_elem(arr: Sequence[int]) -> int:
    """Return the index of the first smallest element."""
    if not arr:
        raise ValueError("argmin_elem() of an empty sequence")
    return min(range(len(arr)), key=arr.__getitem__)


def get_primes(n: int) -> list[int]:
    """Return the prime factors of ``n`` with multiplicity, in order."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    primes: list[int] = []
    divisor = 2
    while divisor * divisor <= n:
        while n % divisor == 0:
            primes.append(divisor)
            n //= divisor
        divisor += 1
    if n > 1:
        primes.append(n)
    return primes