#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Validate a solgen grammar config YAML against the schema and the full load pipeline.
Use this when authoring custom weights to sanity-check before running solgen.
Exit 0 if valid; non-zero and message on failure.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add project root so we can import solgen
_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))


def main() -> int:
    if len(sys.argv) != 2:
        print("Usage: check-grammar-config.py <path-to-grammar.yaml>", file=sys.stderr)
        return 2
    path = Path(sys.argv[1])
    if not path.exists():
        print(f"Error: file not found: {path}", file=sys.stderr)
        return 1
    try:
        from solgen.core.grammar_config import load_grammar_config

        config = load_grammar_config(path)
        print(f"OK: {path}")
        print(f"  source units: up to {config.max_source_units}")
        print(f"  imports per unit: up to {config.max_imports}")
        print(f"  free functions per unit: up to {config.max_free_functions}")
        print(f"  functions per contract: up to {config.max_functions}")
        print(f"  generic pragmas: {len(config.generic_pragmas)}")
        print(f"  abi pragmas: {', '.join(config.abi_pragmas)}")
        return 0
    except ValueError as e:
        print(f"Invalid config: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
