# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""CLI entry point for solgen."""

import sys
from pathlib import Path

from solgen.core.grammar_config import load_grammar_config
from solgen.core.solgen import SolidityGenerator


def main(argv: list[str] | None = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        description="solgen - random Solidity-like program generator for front-end fuzzing"
    )
    parser.add_argument("--output", "-o", type=Path, default=Path("test.sol"))
    parser.add_argument("--seed", "-s", type=int, default=42)
    parser.add_argument(
        "--verbosity",
        "-v",
        default="info",
        choices=["debug", "info", "warning", "error"],
    )
    parser.add_argument(
        "--grammar-config",
        type=Path,
        default=None,
        metavar="FILE",
        help="Grammar weights and pragma catalogs YAML. Default: built-in config.",
    )
    parser.add_argument(
        "--debug-yaml",
        type=Path,
        default=None,
        metavar="FILE",
        help="Optional: write the final generation state to FILE",
    )
    parser.add_argument(
        "--split-dir",
        type=Path,
        default=None,
        metavar="DIR",
        help="Optional: also write each source unit to DIR/<path>",
    )
    args = parser.parse_args(argv)

    if args.seed < 0:
        parser.error("--seed must be a non-negative integer")

    config = None
    if args.grammar_config is not None:
        try:
            config = load_grammar_config(args.grammar_config)
        except (OSError, ValueError) as e:
            print(f"solgen: invalid grammar config: {e}", file=sys.stderr)
            return 1

    solgen = SolidityGenerator(
        seed=args.seed,
        config=config,
        output=args.output,
        verbosity=args.verbosity,
    )
    solgen.run()
    solgen.info(f"Wrote {args.output}")
    if args.split_dir is not None:
        for path in solgen.write_sources(args.split_dir):
            solgen.info(f"Wrote {path}")
    if args.debug_yaml is not None:
        solgen.write_debug_yaml(args.debug_yaml)
        solgen.info(f"Wrote debug YAML to {args.debug_yaml}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
