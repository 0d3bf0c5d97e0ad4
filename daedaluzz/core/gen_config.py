# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Load generation parameters from YAML config. Used by Daedaluzz to shape the program."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

DEFAULT_ADDITIONAL_INPUTS = ("msg.value", "tx.gasprice", "block.number")


@dataclass(frozen=True)
class TreeShape:
    """Stateless mode: one decision tree."""

    max_depth: int = 8
    return_probability: float = 0.1
    use_additional_inputs: bool = True


@dataclass(frozen=True)
class MazeShape:
    """Stateful mode: a dim_x by dim_y grid of guard chains."""

    dim_x: int = 7
    dim_y: int = 7
    min_depth: int = 2
    max_depth: int = 16
    use_additional_inputs: bool = False


@dataclass(frozen=True)
class GenerationConfig:
    seed: int = 0
    num_params: int = 8
    max_const: int = 64
    additional_inputs: tuple[str, ...] = DEFAULT_ADDITIONAL_INPUTS
    tree: TreeShape = field(default_factory=TreeShape)
    maze: MazeShape = field(default_factory=MazeShape)

    def tree_inputs(self) -> tuple[str, ...]:
        return self.additional_inputs if self.tree.use_additional_inputs else ()

    def maze_inputs(self) -> tuple[str, ...]:
        return self.additional_inputs if self.maze.use_additional_inputs else ()

    @property
    def param_names(self) -> list[str]:
        return [f"p{i}" for i in range(self.num_params)]


def get_schema_path() -> Path:
    """Path to the generation config JSON Schema (for validation of user and default configs)."""
    return Path(__file__).resolve().parent.parent / "config" / "generation_config_schema.json"


def get_default_config_path() -> Path:
    """Path to the default generation config shipped with Daedaluzz."""
    return Path(__file__).resolve().parent.parent / "config" / "generation_default.yaml"


def validate_generation_config(raw: dict[str, Any], path: Path | None = None) -> None:
    """Validate parsed YAML against the generation config schema. Raises ValueError on failure."""
    import jsonschema

    schema = json.loads(get_schema_path().read_text())
    try:
        jsonschema.validate(instance=raw, schema=schema)
    except jsonschema.ValidationError as e:
        loc = f" ({path})" if path else ""
        msg = getattr(e, "message", str(e))
        raise ValueError(f"Generation config schema validation failed{loc}: {msg}") from e


def load_generation_config(path: Path) -> GenerationConfig:
    """Load and validate a generation config from YAML.

    Keys missing from the file keep their built-in defaults. Raises ValueError when
    the file is not YAML, is empty, fails the schema, or asks for an empty depth range.
    """
    import yaml

    try:
        raw = yaml.safe_load(Path(path).read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Generation config is not valid YAML ({path}): {e}") from e
    if not raw:
        raise ValueError(f"Generation config is empty: {path}")
    validate_generation_config(raw, path)

    gen = raw["generation"]
    tree = TreeShape(**gen.get("tree", {}))
    maze = MazeShape(**gen.get("maze", {}))
    if maze.min_depth > maze.max_depth:
        raise ValueError(
            f"Maze min_depth ({maze.min_depth}) exceeds max_depth ({maze.max_depth}) in {path}"
        )

    scalars = {k: gen[k] for k in ("seed", "num_params", "max_const") if k in gen}
    additional = gen.get("additional_inputs")
    if additional is not None:
        scalars["additional_inputs"] = tuple(additional)
    return GenerationConfig(tree=tree, maze=maze, **scalars)
