# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Base class for grammar productions and the weighted child traversal."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from solgen.core.solgen import SolidityGenerator


class GeneratorBase:
    """
    One grammar production.

    setup() declares the children as (generator, max_repeat) pairs; the list
    is sealed once setup() has run. visit() produces this production's text,
    usually by splicing in visit_children().
    """

    def __init__(self, mutator: SolidityGenerator) -> None:
        self.mutator = mutator
        self.state = mutator.test_state
        self.random = mutator.random_dist
        self.name = self.__class__.__name__
        self.generators: tuple[tuple[GeneratorBase, int], ...] = ()
        self._sealed = False
        parent_log = getattr(mutator, "log", None) or logging.getLogger("solgen")
        self.log = parent_log.getChild(self.name)

    def add_generators(self, children: Iterable[tuple[GeneratorBase, int]]) -> None:
        if self._sealed:
            raise AssertionError(f"{self.name}: children are fixed once setup has run")
        added = []
        for child, max_repeat in children:
            if max_repeat < 1:
                raise AssertionError(
                    f"{self.name}: weight for {child.name} must be at least 1, got {max_repeat}"
                )
            added.append((child, max_repeat))
        self.generators += tuple(added)

    def setup(self) -> None:
        """Declare child productions. Leaves keep the default (no children)."""

    def seal(self) -> None:
        self._sealed = True

    def visit(self) -> str:
        raise NotImplementedError

    def generate(self) -> str:
        self.log.debug("visit")
        return self.visit()

    def visit_children(self) -> str:
        """
        Visit children in a random order.

        Each child fires with probability 1/(max_repeat + 1); when it fires it
        is visited between 1 and max_repeat times.
        """
        randomised = list(self.generators)
        self.random.shuffle(randomised)
        out: list[str] = []
        for child, max_repeat in randomised:
            if self.random.likely(max_repeat + 1):
                for _ in range(self.random.distribution_one_to_n(max_repeat)):
                    out.append(child.generate())
        return "".join(out)


def indentation(level: int) -> str:
    return "  " * level
