# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Tests for TestState and SourceUnitState bookkeeping."""

import pytest

from solgen.core.random_dist import UniformRandomDist
from solgen.core.test_state import SourceUnitState, TestState


def _state(seed: int = 1) -> TestState:
    return TestState(UniformRandomDist.from_seed(seed))


def test_add_source_mints_unique_paths_and_sets_current():
    state = _state()
    assert state.empty()
    first = state.add_source()
    second = state.add_source()
    assert (first, second) == ("su0.sol", "su1.sol")
    assert state.current_path() == "su1.sol"
    assert state.source_unit_paths() == {"su0.sol", "su1.sol"}
    assert state.size() == len(state) == 2


def test_current_path_fails_on_empty_state():
    with pytest.raises(AssertionError):
        _state().current_path()


def test_random_path_fails_on_empty_state():
    with pytest.raises(AssertionError):
        _state().random_path()


def test_random_path_picks_known_paths():
    state = _state()
    for _ in range(3):
        state.add_source()
    picks = {state.random_path() for _ in range(200)}
    assert picks == state.source_unit_paths()


def test_random_non_current_path_needs_two_units():
    state = _state()
    state.add_source()
    with pytest.raises(AssertionError):
        state.random_non_current_path()


def test_random_non_current_path_never_returns_current():
    state = _state()
    for _ in range(4):
        state.add_source()
    picks = {state.random_non_current_path() for _ in range(300)}
    assert state.current_path() not in picks
    assert picks == {"su0.sol", "su1.sol", "su2.sol"}


def test_random_path_is_seed_deterministic():
    def draws(seed: int) -> list[str]:
        state = _state(seed)
        for _ in range(3):
            state.add_source()
        return [state.random_path() for _ in range(20)]

    assert draws(77) == draws(77)


def test_names_are_unique_per_unit():
    state = _state()
    state.add_source()
    assert [state.new_contract() for _ in range(3)] == ["C0", "C1", "C2"]
    assert [state.new_function() for _ in range(2)] == ["f0", "f1"]
    state.add_source()
    # Counters are scoped to the unit.
    assert state.new_contract() == "C0"
    assert state.new_function() == "f0"
    assert state.source_unit_state["su0.sol"].contracts == ["C0", "C1", "C2"]


def test_update_records_latest_declarations():
    state = _state()
    state.add_source()
    state.update_contract(state.new_contract())
    state.update_function(state.new_function())
    unit = state.current_unit()
    assert unit.current_contract == "C0"
    assert unit.current_function == "f0"


def test_indent_and_unindent_balance():
    state = _state()
    state.add_source()
    state.indent()
    state.indent()
    assert state.indentation_level == 2
    state.unindent()
    state.unindent()
    assert state.indentation_level == 0
    with pytest.raises(AssertionError):
        state.unindent()


def test_indentation_is_per_unit():
    state = _state()
    state.add_source()
    state.indent()
    state.add_source()
    assert state.indentation_level == 0
    assert state.source_unit_state["su0.sol"].indentation_level == 1


def test_duplicate_import_is_rejected():
    unit = SourceUnitState()
    unit.add_imported_source_path("su0.sol")
    assert unit.source_path_imported("su0.sol")
    with pytest.raises(AssertionError):
        unit.add_imported_source_path("su0.sol")


def test_to_dict_describes_every_unit():
    state = _state()
    state.add_source()
    state.add_source()
    state.current_unit().add_imported_source_path("su0.sol")
    state.new_function()
    d = state.to_dict()
    assert d["current_path"] == "su1.sol"
    assert set(d["sources"]) == {"su0.sol", "su1.sol"}
    assert d["sources"]["su1.sol"]["imports"] == ["su0.sol"]
    assert d["sources"]["su1.sol"]["functions"] == ["f0"]
    assert d["sources"]["su0.sol"]["indentation_level"] == 0
