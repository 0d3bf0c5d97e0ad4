# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""CLI entry point for Daedaluzz."""

import sys
from pathlib import Path

from daedaluzz.core.daedaluzz import DEFAULT_OUTPUT, Daedaluzz
from daedaluzz.core.gen_config import get_default_config_path, load_generation_config
from daedaluzz.core.generator_base import DEFAULT_MODE, Mode
from daedaluzz.core.program import ProgramError
from daedaluzz.utils import VERSION

EXIT_ERROR = 1
EXIT_INTERNAL_FAULT = 2


def main() -> None:
    import argparse

    parser = argparse.ArgumentParser(
        prog="daedaluzz",
        description="Daedaluzz - benchmark smart-contract generator",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("--output", "-o", type=Path, default=DEFAULT_OUTPUT)
    parser.add_argument(
        "--seed",
        "-s",
        type=int,
        default=None,
        help="Seed for the random stream. Default: seed from the generation config.",
    )
    parser.add_argument(
        "--mode",
        "-m",
        default=DEFAULT_MODE.value,
        choices=[m.value for m in Mode],
        help="tree: single-function decision tree. maze: stateful grid of guard chains.",
    )
    parser.add_argument(
        "--verbosity",
        "-v",
        default="info",
        choices=["debug", "info", "warning", "error"],
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        metavar="FILE",
        help="Generation config YAML. Default: built-in config.",
    )
    parser.add_argument(
        "--debug-yaml",
        type=Path,
        default=None,
        metavar="FILE",
        help="Optional: write debug YAML to FILE",
    )
    args = parser.parse_args()

    config_path = args.config if args.config is not None else get_default_config_path()
    try:
        config = load_generation_config(config_path)
    except (OSError, ValueError) as e:
        print(f"daedaluzz: terminated with error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)

    try:
        daedaluzz = Daedaluzz(
            mode=args.mode,
            seed=args.seed,
            output=args.output,
            verbosity=args.verbosity,
            config=config,
        )
        daedaluzz.run()
        if args.debug_yaml is not None:
            daedaluzz.write_debug_yaml(args.debug_yaml)
            daedaluzz.info(f"Wrote debug YAML to {args.debug_yaml}")
        daedaluzz.info(f"Wrote {args.output}")
    except (ProgramError, OSError) as e:
        print(f"daedaluzz: terminated with error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)
    except Exception as e:
        print(f"daedaluzz: internal fault: {e!r}", file=sys.stderr)
        sys.exit(EXIT_INTERNAL_FAULT)


if __name__ == "__main__":
    main()
