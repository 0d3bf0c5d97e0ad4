#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Validate a Daedaluzz generation config YAML against the schema and the loader.
Use this when authoring a custom generation config to sanity-check before running Daedaluzz.
Exit 0 if valid; non-zero and message on failure.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add project root so we can import daedaluzz
_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))


def main() -> int:
    if len(sys.argv) != 2:
        print("Usage: check-config.py <path-to-generation.yaml>", file=sys.stderr)
        return 2
    path = Path(sys.argv[1])
    if not path.exists():
        print(f"Error: file not found: {path}", file=sys.stderr)
        return 1
    try:
        from daedaluzz.core.gen_config import load_generation_config

        config = load_generation_config(path)
        print(f"OK: {path}")
        print(f"  seed={config.seed} params={config.num_params} max_const={config.max_const}")
        print(f"  external inputs: {', '.join(config.additional_inputs) or 'none'}")
        tree = config.tree
        print(
            f"  tree: max_depth={tree.max_depth} return_probability={tree.return_probability}"
            f" external={'on' if tree.use_additional_inputs else 'off'}"
        )
        maze = config.maze
        print(
            f"  maze: {maze.dim_x}x{maze.dim_y} depth={maze.min_depth}..{maze.max_depth}"
            f" external={'on' if maze.use_additional_inputs else 'off'}"
        )
        return 0
    except ValueError as e:
        print(f"Invalid config: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
