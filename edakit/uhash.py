"""Random number generation and the universal family of hash functions."""

from __future__ import annotations

from dataclasses import dataclass, field

P = 4294967311
"""The prime used by default by the universal hash functions."""

_UINT64 = (1 << 64) - 1


class MinstdRand:
    """The "minimal standard" linear congruential generator (a=48271, m=2**31-1)."""

    MULTIPLIER = 48271
    MODULUS = 2**31 - 1
    MIN = 1
    MAX = MODULUS - 1

    def __init__(self, seed: int = 1) -> None:
        self._state = 1
        self.seed(seed)

    def seed(self, value: int) -> None:
        """Restart the sequence; a seed that is a multiple of the modulus acts as 1."""
        state = value % self.MODULUS
        self._state = state if state != 0 else 1

    def __call__(self) -> int:
        """The next number of the sequence, in [MIN, MAX]."""
        self._state = (self._state * self.MULTIPLIER) % self.MODULUS
        return self._state


GENERATOR = MinstdRand()
"""Shared source of random bits for uniform() and pick_at_random()."""


def _canonical(gen: MinstdRand) -> float:
    """A double in [0, 1) built from two draws (53 bits of precision)."""
    span = gen.MAX - gen.MIN + 1
    total = 0.0
    scale = 1.0
    for _ in range(2):
        total += float(gen() - gen.MIN) * scale
        scale = float(scale * span) if scale == 1.0 else float(int(scale) * span)
    result = total / scale
    if result >= 1.0:
        result = 1.0 - 2.0**-53
    return result


def uniform() -> float:
    """A uniform random number in [0.0, 1.0)."""
    return _canonical(GENERATOR)


def _uniform_int(gen: MinstdRand, low: int, high: int) -> int:
    """A uniform integer in [low, high] using 64-bit unsigned arithmetic."""
    gen_range = gen.MAX - gen.MIN
    wanted = (high - low) & _UINT64
    if gen_range > wanted:
        buckets = wanted + 1
        scaling = gen_range // buckets
        past = buckets * scaling
        while True:
            ret = gen() - gen.MIN
            if ret < past:
                break
        ret //= scaling
    elif gen_range < wanted:
        step = gen_range + 1
        while True:
            upper = step * _uniform_int(gen, 0, wanted // step)
            ret = (upper + (gen() - gen.MIN)) & _UINT64
            if not (ret > wanted or ret < upper):
                break
    else:
        ret = gen() - gen.MIN
    return (ret + low) & _UINT64


def pick_at_random(a: int, b: int) -> int:
    """Pick a uniform random integer from the closed range [a, b] (a < b)."""
    if a < 0 or b < 0:
        raise ValueError("the bounds must be non negative")
    if not a < b:
        raise ValueError("the lower bound must be less than the upper bound")
    return _uniform_int(GENERATOR, a, b)


def _is_power_of_two(value: int) -> bool:
    return value > 1 and value & (value - 1) == 0


@dataclass(frozen=True)
class UHash:
    """h(k) = ((a*k + b) % p) % m, with m a power of two and 0 < a < p, 0 <= b < p."""

    m: int
    p: int = field(default=P)
    a: int = field(default=1)
    b: int = field(default=0)

    def __post_init__(self) -> None:
        if not _is_power_of_two(self.m):
            raise ValueError("m must be a power of two greater than 1")
        if not self.m < self.p:
            raise ValueError("m must be less than p")
        if not 0 < self.a < self.p:
            raise ValueError("a must be in (0, p)")
        if not 0 <= self.b < self.p:
            raise ValueError("b must be in [0, p)")

    @classmethod
    def random(cls, m: int = 2) -> "UHash":
        """A function of table size m picked at random from the family with p=P."""
        if not _is_power_of_two(m):
            raise ValueError("m must be a power of two greater than 1")
        if not m < P:
            raise ValueError("m must be less than p")
        a = pick_at_random(1, P)
        b = pick_at_random(0, P)
        return cls(m, P, a, b)

    def pick_at_new(self, m: int) -> "UHash":
        """A new function of table size m picked at random from the family."""
        if not _is_power_of_two(m):
            raise ValueError("m must be a power of two greater than 1")
        if not m < self.p:
            raise ValueError("m must be less than p")
        return UHash.random(m)

    def __call__(self, k: int) -> int:
        """Hash key k (0 <= k < p) to a table index in [0, m)."""
        if not 0 <= k < self.p:
            raise ValueError("the key must be in [0, p)")
        # The product wraps around as 64-bit unsigned arithmetic does.
        mixed = (self.a * k + self.b) & _UINT64
        return (mixed % self.p) % self.m