"""
creature_sim module: creature/random_source.py

Seeded random source used by the generator.

All generation randomness flows through one explicit ``SeededRandom`` that is
passed down the call chain, so a creature is a pure function of its seed.

The algorithm is part of the seed contract: changing it changes every
previously shared creature. It is pinned to CPython's ``random.Random``
(MT19937 seeded via init_by_array, 53-bit doubles built from two 32-bit
outputs, integers by rejection sampling over ``getrandbits``).

Non-negative seeds are handed to ``random.Random`` as-is. CPython seeds an
int from ``abs(n)``, so a negative seed is instead keyed by the string
``"creature-seed:<n>"``, which CPython expands with SHA-512 into a seed far
outside the range of ordinary integer seeds.
"""

from __future__ import annotations
import math
import numbers
import random

PRNG_ALGORITHM = "mt19937-cpython-v1"


class InvalidSeed(ValueError):
    """Raised for seeds that cannot produce a well-defined sequence."""


def validate_seed(seed) -> int:
    """
    Return ``seed`` as an int, or raise InvalidSeed.

    Integral floats (``7.0``) are accepted; bools, non-finite and fractional
    values are not.
    """
    if isinstance(seed, bool):
        raise InvalidSeed(f"seed must be an integer, got bool {seed!r}")
    if isinstance(seed, numbers.Integral):
        return int(seed)
    if isinstance(seed, numbers.Real):
        if not math.isfinite(seed):
            raise InvalidSeed(f"seed must be finite, got {seed!r}")
        if not float(seed).is_integer():
            raise InvalidSeed(f"seed must be an integer, got {seed!r}")
        return int(seed)
    raise InvalidSeed(f"seed must be an integer, got {type(seed).__name__}")


def seed_key(seed: int):
    """The value ``random.Random`` is seeded with for ``seed``."""
    if seed >= 0:
        return seed
    return f"creature-seed:{seed}"


class SeededRandom:
    def __init__(self, seed):
        self.seed = validate_seed(seed)
        self._rng = random.Random(seed_key(self.seed))

    def real(self, a: float, b: float) -> float:
        """
        Uniform float between ``a`` and ``b``.

        Argument order does not matter: ``real(10, -20)`` covers the same
        interval as ``real(-20, 10)``.
        """
        return a + (b - a) * self._rng.random()

    def integer(self, a: int, b: int) -> int:
        """Uniform int in [a, b], both ends inclusive."""
        lo, hi = (a, b) if a <= b else (b, a)
        return self._rng.randint(lo, hi)

    def bool(self, p: float = 0.5) -> bool:
        return self._rng.random() < p
