# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Load grammar weights and pragma catalogs from YAML config."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

GENERIC_PRAGMAS = (
    "pragma solidity >= 0.0.0;",
    "pragma experimental SMTChecker;",
)
ABI_PRAGMAS = (
    "pragma abicoder v1;",
    "pragma abicoder v2;",
)


@dataclass(frozen=True)
class GrammarConfig:
    """Repeat weights for each weighted edge plus the pragma catalogs."""

    max_source_units: int = 3
    max_imports: int = 2
    max_free_functions: int = 2
    max_functions: int = 4
    generic_pragmas: tuple[str, ...] = GENERIC_PRAGMAS
    abi_pragmas: tuple[str, ...] = ABI_PRAGMAS

    def __post_init__(self) -> None:
        for field_name in ("max_source_units", "max_imports", "max_free_functions", "max_functions"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{field_name} must be an integer >= 1, got {value!r}")
        if not self.generic_pragmas:
            raise ValueError("generic_pragmas must not be empty")
        if len(set(self.generic_pragmas)) != len(self.generic_pragmas):
            raise ValueError(f"generic_pragmas must not repeat entries, got {self.generic_pragmas}")
        if len(self.abi_pragmas) != 2 or self.abi_pragmas[0] == self.abi_pragmas[1]:
            raise ValueError(f"abi_pragmas must hold two distinct directives, got {self.abi_pragmas}")
        # A shared entry would let one block carry both ABI coders.
        shared = set(self.generic_pragmas) & set(self.abi_pragmas)
        if shared:
            raise ValueError(f"generic_pragmas must not contain ABI coder directives: {sorted(shared)}")

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["generic_pragmas"] = list(self.generic_pragmas)
        d["abi_pragmas"] = list(self.abi_pragmas)
        return d


def get_schema_path() -> Path:
    """Path to the grammar config JSON Schema."""
    return Path(__file__).resolve().parent.parent / "config" / "grammar_config_schema.json"


def get_default_config_path() -> Path:
    """Path to the default grammar config shipped with solgen."""
    return Path(__file__).resolve().parent.parent / "config" / "grammar_default.yaml"


def validate_grammar_config(raw: dict[str, Any], path: Path | None = None) -> None:
    """Validate parsed YAML against the grammar config schema. Raises ValueError on failure."""
    import jsonschema

    schema = json.loads(get_schema_path().read_text())
    try:
        jsonschema.validate(instance=raw, schema=schema)
    except jsonschema.ValidationError as e:
        loc = f" ({path})" if path else ""
        msg = getattr(e, "message", str(e))
        raise ValueError(f"Grammar config schema validation failed{loc}: {msg}") from e


def load_grammar_config(path: Path) -> GrammarConfig:
    """Load and validate a grammar config. Keys left out fall back to the built-in defaults."""
    import yaml

    raw = yaml.safe_load(Path(path).read_text())
    if not raw:
        raise ValueError(f"Grammar config is empty: {path}")
    validate_grammar_config(raw, path)

    grammar = raw["grammar"]
    kwargs: dict[str, Any] = {}
    for key in ("max_source_units", "max_imports", "max_free_functions", "max_functions"):
        if key in grammar:
            kwargs[key] = int(grammar[key])
    for key in ("generic_pragmas", "abi_pragmas"):
        if key in grammar:
            kwargs[key] = tuple(str(p).strip() for p in grammar[key])
    try:
        return GrammarConfig(**kwargs)
    except ValueError as e:
        raise ValueError(f"Invalid grammar config ({path}): {e}") from e
