# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Daedaluzz main class: one seeded generation pass and its output."""

from __future__ import annotations

import dataclasses
import logging
import random
import sys
import time
from pathlib import Path

from daedaluzz.core.gen_config import (
    GenerationConfig,
    get_default_config_path,
    load_generation_config,
)
from daedaluzz.core.generator_base import DEFAULT_MODE, Mode, get_generator_for_mode
from daedaluzz.core.program import parse_skeleton, render_program, write_program
from daedaluzz.core.registry import FailureRegistry

DEFAULT_OUTPUT = Path("generated-maze.sol")


class Daedaluzz:
    """Benchmark program generator main class."""

    def __init__(
        self,
        mode: Mode | str = DEFAULT_MODE,
        generator_factory: object | None = None,
        seed: int | None = None,
        output: Path | None = None,
        verbosity: str = "info",
        config: Path | GenerationConfig | None = None,
    ) -> None:
        self.mode = Mode(mode)
        self.output = Path(output) if output is not None else DEFAULT_OUTPUT

        self.log = logging.getLogger("daedaluzz")
        if not self.log.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.log.addHandler(handler)
        self.log.setLevel(getattr(logging, verbosity.upper()))
        self.debug = self.log.debug
        self.info = self.log.info
        self.warning = self.log.warning
        self.error = self.log.error

        # Config: built-in defaults unless a YAML path or a ready config is given.
        if isinstance(config, GenerationConfig):
            gen_config = config
        else:
            config_path = config if config is not None else get_default_config_path()
            gen_config = load_generation_config(config_path)
        if seed is not None:
            gen_config = dataclasses.replace(gen_config, seed=seed)
        self.config = gen_config
        self.seed = gen_config.seed

        self.random = random.Random()
        self.random.seed(self.seed)
        self.registry = FailureRegistry()
        self.program: str | None = None

        factory = generator_factory or get_generator_for_mode(self.mode)
        self.generator = factory(self)

    def create_program(self) -> str:
        if self.program is not None:
            raise RuntimeError("create_program() already ran; use a new Daedaluzz per program")
        self.info(f"Creating {self.mode.value} program (seed {self.seed})")
        start = time.time()
        skeleton = parse_skeleton(self.generator.skeleton, name=self.mode.value)
        body = self.generator.gen()
        self.program = render_program(skeleton, self.generator.placeholders(body))
        end = time.time()
        self.info(
            f"Generated {self.registry.count} failure markers in {(end - start):.2f} seconds"
        )
        return self.program

    def run(self) -> None:
        """Create program and write output."""
        self.create_program()
        self.write_program()

    def write_program(self) -> None:
        if self.program is None:
            raise RuntimeError("write_program() called before create_program()")
        write_program(self.output, self.program)

    def write_debug_yaml(self, path: Path) -> None:
        """Write debug YAML describing the generated structure (nodes, cells, failure ids)."""
        import yaml

        out: dict = {
            "mode": self.mode.value,
            "seed": self.seed,
            "num_params": self.config.num_params,
            "max_const": self.config.max_const,
            "leaf_count": self.registry.count,
        }
        out.update(self.generator.export())
        with open(path, "w") as f:
            yaml.dump(out, f, default_flow_style=False, sort_keys=False)
