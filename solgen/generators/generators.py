# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Concrete grammar productions: test case, source unit, pragma, import, contract, function."""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator

from solgen.core.generator_base import GeneratorBase, indentation

if TYPE_CHECKING:
    from solgen.core.solgen import SolidityGenerator


class TestCaseGenerator(GeneratorBase):
    """Root production: a sequence of source units."""

    __test__ = False

    def setup(self) -> None:
        self.add_generators(
            [(self.mutator.generator(SourceUnitGenerator), self.mutator.config.max_source_units)]
        )

    def visit(self) -> str:
        return self.visit_children()


class SourceUnitGenerator(GeneratorBase):
    """One source unit, introduced by a ``==== Source: <path> ====`` header."""

    def setup(self) -> None:
        config = self.mutator.config
        self.add_generators(
            [
                (self.mutator.generator(ImportGenerator), config.max_imports),
                (self.mutator.generator(PragmaGenerator), 1),
                (self.mutator.generator(ContractGenerator), 1),
                (self.mutator.generator(FunctionGenerator), config.max_free_functions),
            ]
        )

    def visit(self) -> str:
        path = self.state.add_source()
        self.log.debug(f"New source unit: {path}")
        return f"\n==== Source: {path} ====\n" + self.visit_children()


class PragmaGenerator(GeneratorBase):
    """Random generic pragmas plus exactly one ABI coder pragma."""

    def visit(self) -> str:
        config = self.mutator.config
        pragmas = set(self.random.subset(config.generic_pragmas))
        # Either abicoder v1 or v2, never both.
        abi = config.abi_pragmas[self.random.distribution_one_to_n(len(config.abi_pragmas)) - 1]
        pragmas.add(abi)
        return "\n".join(sorted(pragmas)) + "\n"


class ImportGenerator(GeneratorBase):
    """Import another, not yet imported, source unit. Emits nothing otherwise."""

    def visit(self) -> str:
        if self.state.size() < 2:
            return ""
        import_path = self.state.random_non_current_path()
        unit = self.state.current_unit()
        if unit.source_path_imported(import_path):
            self.log.debug(f"{self.state.current_path()} already imports {import_path}")
            return ""
        unit.add_imported_source_path(import_path)
        return f'import "{import_path}";\n'


class ContractGenerator(GeneratorBase):
    """Contract whose body holds member functions."""

    def setup(self) -> None:
        self.add_generators(
            [(self.mutator.generator(FunctionGenerator), self.mutator.config.max_functions)]
        )

    @contextmanager
    def _contract_scope(self) -> Iterator[None]:
        """Indent and switch functions to member form; undone on every exit path."""
        functions = self.mutator.generator(FunctionGenerator)
        self.state.indent()
        try:
            functions.scope(free=False)
            yield
        finally:
            functions.scope(free=True)
            self.state.unindent()

    def visit(self) -> str:
        name = self.state.new_contract()
        self.state.update_contract(name)
        prefix = indentation(self.state.indentation_level)
        out = [f"{prefix}contract {name} {{\n"]
        with self._contract_scope():
            out.append(self.visit_children())
        out.append(f"{prefix}}}\n")
        return "".join(out)


class FunctionGenerator(GeneratorBase):
    """Minimal pure function; public when free, no visibility inside a contract."""

    def __init__(self, mutator: SolidityGenerator) -> None:
        super().__init__(mutator)
        self.free_function = True

    def scope(self, free: bool) -> None:
        self.free_function = free

    def visit(self) -> str:
        name = self.state.new_function()
        self.state.update_function(name)
        visibility = "public " if self.free_function else ""
        return (
            f"{indentation(self.state.indentation_level)}"
            f"function {name}() {visibility}pure {{}}\n"
        )


# Closed set of productions, in the order the registry creates them.
GENERATOR_KINDS: tuple[type[GeneratorBase], ...] = (
    TestCaseGenerator,
    SourceUnitGenerator,
    PragmaGenerator,
    ImportGenerator,
    ContractGenerator,
    FunctionGenerator,
)
