# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Tests for the solgen CLI."""

from pathlib import Path

import pytest
import yaml

from solgen.__main__ import main
from solgen.core.solgen import generate


def test_cli_writes_program_state_and_units(tmp_path: Path):
    out = tmp_path / "out.sol"
    debug = tmp_path / "state.yaml"
    units = tmp_path / "units"
    rc = main(
        [
            "--seed",
            "3",
            "--output",
            str(out),
            "--verbosity",
            "error",
            "--debug-yaml",
            str(debug),
            "--split-dir",
            str(units),
        ]
    )
    assert rc == 0
    assert out.read_text() == generate(3)
    assert yaml.safe_load(debug.read_text())["seed"] == 3
    assert units.is_dir()


def test_cli_uses_grammar_config(tmp_path: Path):
    config = tmp_path / "grammar.yaml"
    config.write_text("grammar:\n  max_source_units: 1\n")
    out = tmp_path / "out.sol"
    rc = main(["-s", "11", "-o", str(out), "-v", "error", "--grammar-config", str(config)])
    assert rc == 0
    assert out.read_text().count("==== Source:") <= 1


def test_cli_rejects_bad_grammar_config(tmp_path: Path, capsys):
    config = tmp_path / "grammar.yaml"
    config.write_text("grammar:\n  max_imports: 0\n")
    rc = main(["-o", str(tmp_path / "out.sol"), "-v", "error", "--grammar-config", str(config)])
    assert rc == 1
    assert "invalid grammar config" in capsys.readouterr().err
    assert not (tmp_path / "out.sol").exists()


def test_cli_rejects_negative_seed(tmp_path: Path):
    with pytest.raises(SystemExit):
        main(["-s", "-1", "-o", str(tmp_path / "out.sol")])
