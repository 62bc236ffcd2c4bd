"""Open addressing collision resolution built on universal hash functions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from edakit.uhash import UHash


def _check_table_size(m: int) -> None:
    if not (m > 1 and m & (m - 1) == 0):
        raise ValueError("the table size must be a power of two greater than 1")


class OACollisionResolution(ABC):
    """A universal hash function plus a rule that gives alternative slots."""

    def __init__(self, hash_f: UHash) -> None:
        self.hash_f = hash_f

    def m(self) -> int:
        """The number of slots the function maps keys onto."""
        return self.hash_f.m

    @abstractmethod
    def __call__(self, k: int, iteration: int = 0) -> int:
        """The slot for key k at the given probe number (0 is the first try)."""

    @abstractmethod
    def pick_at_new(self, new_m: int) -> "OACollisionResolution":
        """The same method with a new random hash function for new_m slots."""


class LPHash(OACollisionResolution):
    """Linear probing: each collision moves one slot forward."""

    def __call__(self, k: int, iteration: int = 0) -> int:
        if iteration == 0:
            return self.hash_f(k)
        return (self.hash_f(k) + iteration) % self.m()

    def pick_at_new(self, new_m: int) -> "LPHash":
        _check_table_size(new_m)
        return LPHash(UHash.random(new_m))


class QPHash(OACollisionResolution):
    """Quadratic probing with c1 = c2 = 1/2, suited to power of two tables."""

    def __call__(self, k: int, iteration: int = 0) -> int:
        base = self.hash_f(k)
        if iteration == 0:
            return base
        increment = (iteration * iteration + iteration) // 2
        return (base % self.m() + increment) % self.m()

    def pick_at_new(self, new_m: int) -> "QPHash":
        _check_table_size(new_m)
        return QPHash(UHash.random(new_m))


class RPHash(OACollisionResolution):
    """Random probing: each collision moves c slots forward.

    Without an explicit c, c is m/2 - 1.
    """

    def __init__(self, hash_f: UHash, c: Optional[int] = None) -> None:
        super().__init__(hash_f)
        m = self.m()
        if c is None:
            c = m // 2 - 1
        else:
            if c <= 0:
                raise ValueError("c must be greater than zero")
            if c <= m and m % c == 0:
                raise ValueError("c must not divide m")
            if m <= c and c % m == 0:
                raise ValueError("m must not divide c")
        self.c = c

    def __call__(self, k: int, iteration: int = 0) -> int:
        initial = self.hash_f(k) % self.m()
        if iteration == 0:
            return initial
        return (initial + iteration * self.c) % self.m()

    def pick_at_new(self, new_m: int) -> "RPHash":
        _check_table_size(new_m)
        return RPHash(UHash.random(new_m))


class RHash(OACollisionResolution):
    """Rehashing with a list of extra functions, then linear probing."""

    def __init__(self, hash_f: UHash, hash_fs: Sequence[UHash]) -> None:
        super().__init__(hash_f)
        hash_fs = tuple(hash_fs)
        if not hash_fs:
            raise ValueError("at least one rehashing function is needed")
        for other in hash_fs:
            if other.m != hash_f.m or other.p != hash_f.p:
                raise ValueError("all hash functions must share m and p")
        self.hash_fs = hash_fs

    def __call__(self, k: int, iteration: int = 0) -> int:
        m = self.m()
        if iteration == 0:
            return self.hash_f(k) % m
        if iteration < len(self.hash_fs):
            return self.hash_fs[iteration](k) % m
        return (self.hash_fs[-1](k) + iteration - len(self.hash_fs)) % m

    def pick_at_new(self, new_m: int) -> "RHash":
        _check_table_size(new_m)
        return RHash(
            UHash.random(new_m), [UHash.random(new_m) for _ in self.hash_fs]
        )