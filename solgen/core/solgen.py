# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Solgen main class: owns one instance of every production and drives a run."""

from __future__ import annotations

import logging
import sys
import time
from pathlib import Path
from typing import TypeVar

from solgen.core.generator_base import GeneratorBase
from solgen.core.grammar_config import (
    GrammarConfig,
    get_default_config_path,
    load_grammar_config,
)
from solgen.core.random_dist import UniformRandomDist
from solgen.core.sources import split_sources
from solgen.core.test_state import TestState
from solgen.generators.generators import GENERATOR_KINDS, TestCaseGenerator

G = TypeVar("G", bound=GeneratorBase)


class SolidityGenerator:
    """Random Solidity-like test program generator."""

    def __init__(
        self,
        seed: int = 42,
        config: GrammarConfig | None = None,
        output: Path | None = None,
        verbosity: str = "info",
    ) -> None:
        self.seed = seed
        self.output = output or Path("test.sol")
        if config is None:
            config = load_grammar_config(get_default_config_path())
        self.config = config

        self.log = logging.getLogger("solgen")
        if not self.log.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(
                logging.Formatter("%(asctime)s - %(name)-20s - %(levelname)s - %(message)s")
            )
            self.log.addHandler(handler)
        self.log.setLevel(getattr(logging, verbosity.upper()))
        self.debug = self.log.debug
        self.info = self.log.info
        self.warning = self.log.warning
        self.error = self.log.error

        self.random_dist: UniformRandomDist | None = None
        self.test_state: TestState | None = None
        self._generators: dict[type[GeneratorBase], GeneratorBase] = {}
        self.program: str | None = None

    def generator(self, kind: type[G]) -> G:
        """The single instance of ``kind`` for the current run."""
        try:
            return self._generators[kind]
        except KeyError:
            raise AssertionError(
                f"Unknown generator kind {getattr(kind, '__name__', kind)!r}"
            ) from None

    def create_generators(self) -> None:
        # Every instance must exist before any setup() looks up a sibling.
        self._generators = {}
        for kind in GENERATOR_KINDS:
            self._generators[kind] = kind(self)

    def setup_generators(self) -> None:
        for g in self._generators.values():
            g.setup()
            g.seal()

    def destroy_generators(self) -> None:
        self._generators = {}

    def generate_test_program(self) -> str:
        """Build the productions, generate one program and tear them down again."""
        self.random_dist = UniformRandomDist.from_seed(self.seed)
        self.test_state = TestState(self.random_dist)
        self.create_generators()
        try:
            self.setup_generators()
            program = self.generator(TestCaseGenerator).generate()
        finally:
            self.destroy_generators()
        self.program = program
        if self.log.isEnabledFor(logging.DEBUG):
            self.debug(f"Test state: {self.test_state.to_dict()}")
        return program

    def run(self) -> str:
        """Generate a program and write it to the output file."""
        self.info(f"Generating test program (seed {self.seed})")
        start = time.time()
        program = self.generate_test_program()
        end = time.time()
        self.info(
            f"Generated {self.test_state.size()} source units, {len(program)} characters in "
            f"{(end - start):.3f} seconds"
        )
        self.output.write_text(program)
        return program

    def write_sources(self, directory: Path) -> list[Path]:
        """Write each source unit of the last program to ``directory/<path>``."""
        if self.program is None:
            raise RuntimeError("No program generated yet")
        directory.mkdir(parents=True, exist_ok=True)
        written = []
        for path, text in split_sources(self.program).items():
            target = directory / path
            target.write_text(text)
            written.append(target)
        return written

    def write_debug_yaml(self, path: Path) -> None:
        """Write debug YAML with the seed, grammar config and final test state."""
        import yaml

        if self.test_state is None:
            raise RuntimeError("No program generated yet")
        out = {
            "seed": self.seed,
            "grammar": self.config.to_dict(),
            "state": self.test_state.to_dict(),
        }
        with open(path, "w") as f:
            yaml.dump(out, f, default_flow_style=False, sort_keys=False)


def generate(seed: int, config: GrammarConfig | None = None) -> str:
    """Generate one test program; the same seed and config always give the same text."""
    return SolidityGenerator(
        seed=seed,
        config=config if config is not None else GrammarConfig(),
        verbosity="warning",
    ).generate_test_program()
