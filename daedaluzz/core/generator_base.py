# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Base generator: body builder, program skeleton and placeholder values."""

from __future__ import annotations

import enum
import importlib
from typing import Any


class Mode(enum.Enum):
    """Which body builder drives the run."""

    TREE = "tree"
    MAZE = "maze"


DEFAULT_MODE = Mode.MAZE


def get_generator_for_mode(mode: Mode | str):
    """Load Generator class from daedaluzz.modes.<mode>."""
    mod = importlib.import_module(f"daedaluzz.modes.{Mode(mode).value}")
    return mod.Generator


class GeneratorBase:
    """A mode: produces the body text and fills the mode's skeleton."""

    mode: Mode
    skeleton: str = ""

    def __init__(self, daedaluzz: object) -> None:
        self.daedaluzz = daedaluzz
        self.config = daedaluzz.config

    def gen(self) -> str:
        """Run the body builder and return the rendered body text."""
        raise NotImplementedError

    def common_placeholders(self) -> dict[str, Any]:
        names = self.config.param_names
        return {
            "params": ", ".join(f"uint64 {n}" for n in names),
            "args": ", ".join(names),
            "leaf_count": self.daedaluzz.registry.count,
        }

    def placeholders(self, body: str) -> dict[str, Any]:
        out = self.common_placeholders()
        out["body"] = body
        return out

    def export(self) -> dict[str, Any]:
        return {}
