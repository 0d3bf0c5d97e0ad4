# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Tests for Daedaluzz generation runs."""

import re
import tempfile
from pathlib import Path

import pytest
import yaml

from daedaluzz.core.daedaluzz import Daedaluzz
from daedaluzz.core.gen_config import GenerationConfig
from daedaluzz.core.generator_base import GeneratorBase, Mode
from daedaluzz.core.program import SkeletonError, SubstitutionError
from tests.helpers import failure_ids


def _run(tmp: str, mode: str = "maze", seed: int | None = None) -> tuple[Daedaluzz, str]:
    out = Path(tmp) / f"{mode}.sol"
    dz = Daedaluzz(mode=mode, seed=seed, output=out, verbosity="warning")
    dz.run()
    return dz, out.read_text()


def test_default_maze_program():
    """seed 0 with default config: 7x7 maze, four movement functions, dense ids."""
    with tempfile.TemporaryDirectory() as tmp:
        dz, content = _run(tmp)
        assert dz.seed == 0
        assert content.startswith("pragma solidity ^0.8.19;\n")
        assert "contract Maze {" in content
        for fn in ("moveNorth", "moveSouth", "moveEast", "moveWest"):
            assert f"function {fn}(uint64 p0, " in content
        assert "function step(uint64 p0, uint64 p1, uint64 p2, uint64 p3, " in content
        assert "return step(p0, p1, p2, p3, p4, p5, p6, p7);" in content
        assert "require(ny < 7);" in content
        assert "require(nx < 7);" in content
        assert len(re.findall(r"if \(x == \d+ && y == \d+\) \{", content)) == 49
        assert "      if (x == 0 && y == 0) {\n        // start\n" in content
        assert "      return 49;\n    }\n  }\n}\n" in content

        ids = failure_ids(content)
        assert ids == list(range(dz.registry.count))
        assert f"/// failure markers: {dz.registry.count}\n" in content
        walls = content.count("require(false);  // wall")
        assert walls + len(ids) == 48


def test_tree_program():
    with tempfile.TemporaryDirectory() as tmp:
        dz, content = _run(tmp, mode="tree")
        assert "contract C {" in content
        assert "function f(uint64 p0, " in content
        assert "payable external returns (uint64)" in content
        assert "Maze" not in content
        assert sorted(failure_ids(content)) == list(range(dz.registry.count))


@pytest.mark.parametrize("mode", ["maze", "tree"])
def test_same_seed_same_bytes(mode):
    with tempfile.TemporaryDirectory() as tmp_a, tempfile.TemporaryDirectory() as tmp_b:
        _, a = _run(tmp_a, mode=mode, seed=11)
        _, b = _run(tmp_b, mode=mode, seed=11)
        assert a == b


def test_seed_overrides_config():
    dz = Daedaluzz(config=GenerationConfig(seed=4), seed=9, verbosity="error")
    assert dz.seed == 9
    assert dz.config.seed == 9


def test_debug_yaml_maze():
    with tempfile.TemporaryDirectory() as tmp:
        dz, _ = _run(tmp)
        path = Path(tmp) / "debug.yaml"
        dz.write_debug_yaml(path)
        data = yaml.safe_load(path.read_text())
        assert data["mode"] == "maze"
        assert data["leaf_count"] == dz.registry.count
        assert len(data["cells"]) == 49
        assert data["cells"][0] == {"x": 0, "y": 0, "index": 0, "kind": "start"}
        chains = [c for c in data["cells"] if c["kind"] == "chain"]
        assert [c["failure_id"] for c in chains] == list(range(dz.registry.count))


def test_debug_yaml_tree():
    with tempfile.TemporaryDirectory() as tmp:
        dz, _ = _run(tmp, mode="tree")
        path = Path(tmp) / "debug.yaml"
        dz.write_debug_yaml(path)
        data = yaml.safe_load(path.read_text())
        assert data["mode"] == "tree"
        assert data["max_depth"] == 8
        assert data["branches"] + 1 == data["leaf_count"]


class _BrokenSkeleton(GeneratorBase):
    mode = Mode.TREE
    skeleton = "contract $ {}"

    def gen(self) -> str:
        return ""


class _UnfilledSkeleton(GeneratorBase):
    mode = Mode.TREE
    skeleton = "contract C { $unknown }"

    def gen(self) -> str:
        return ""


def test_broken_skeleton_propagates():
    dz = Daedaluzz(generator_factory=_BrokenSkeleton, verbosity="error")
    with pytest.raises(SkeletonError):
        dz.create_program()


def test_unfilled_skeleton_propagates():
    dz = Daedaluzz(generator_factory=_UnfilledSkeleton, verbosity="error")
    with pytest.raises(SubstitutionError):
        dz.create_program()


def test_unwritable_output_propagates(tmp_path):
    dz = Daedaluzz(output=tmp_path / "no" / "such" / "dir.sol", verbosity="error")
    with pytest.raises(OSError):
        dz.run()


def test_unknown_mode_rejected():
    with pytest.raises(ValueError):
        Daedaluzz(mode="spiral", verbosity="error")


def test_second_create_program_is_rejected():
    """Generation is one-shot: a repeat would append cells and continue failure ids."""
    with tempfile.TemporaryDirectory() as tmp:
        dz, content = _run(tmp)
        with pytest.raises(RuntimeError, match="already ran"):
            dz.create_program()
        with pytest.raises(RuntimeError, match="already ran"):
            dz.run()
        assert dz.program == content
        assert len(dz.generator.body_sequence.cells) == 49
        assert len(re.findall(r"if \(x == \d+ && y == \d+\) \{", dz.program)) == 49


@pytest.mark.parametrize("mode", ["maze", "tree"])
def test_mode_generator_builds_from_run_object(mode):
    from daedaluzz.core.generator_base import get_generator_for_mode

    dz = Daedaluzz(mode=mode, verbosity="error")
    generator = get_generator_for_mode(mode)(dz)
    assert generator.mode == Mode(mode)
    assert generator.daedaluzz is dz
