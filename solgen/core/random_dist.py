# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Uniform random distribution helpers over a seeded engine."""

from __future__ import annotations

import random
from typing import Sequence, TypeVar

T = TypeVar("T")


class UniformRandomDist:
    """
    Thin wrapper around a seeded ``random.Random``.

    Every draw goes through the wrapped engine, so a fixed seed and a fixed
    call sequence always reproduce the same values.
    """

    def __init__(self, engine: random.Random) -> None:
        self.random_engine = engine

    @classmethod
    def from_seed(cls, seed: int) -> UniformRandomDist:
        engine = random.Random()
        engine.seed(seed)
        return cls(engine)

    def distribution_one_to_n(self, n: int) -> int:
        """Uniform integer in [1, n]."""
        if n < 1:
            raise AssertionError(f"Cannot draw from an empty range [1, {n}]")
        return self.random_engine.randint(1, n)

    def likely(self, n: int) -> bool:
        """True with probability 1/n."""
        return self.distribution_one_to_n(n) == 1

    def subset(self, candidates: Sequence[T]) -> list[T]:
        """Each candidate kept independently with probability 1/2, order preserved."""
        if not candidates:
            raise AssertionError("Cannot select a subset of an empty candidate set")
        return [c for c in candidates if self.likely(2)]

    def shuffle(self, items: list) -> None:
        self.random_engine.shuffle(items)
