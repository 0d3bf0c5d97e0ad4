# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Stateless mode: a single function whose body is one random decision tree."""

from typing import Any

from daedaluzz.core.generator_base import GeneratorBase, Mode
from daedaluzz.sequences.tree import RandomTree

SKELETON = """pragma solidity ^0.8.19;
/// automatically generated by Daedaluzz
/// failure markers: $leaf_count
contract C {
  event AssertionFailed(string message);
  function f($params) payable external returns (uint64) {
    unchecked {
$body
    }
  }
}
"""


class Generator(GeneratorBase):
    mode = Mode.TREE
    skeleton = SKELETON

    def __init__(self, daedaluzz: object) -> None:
        super().__init__(daedaluzz)
        self.body_sequence = RandomTree(daedaluzz)

    def gen(self) -> str:
        self.body_sequence.gen()
        return self.body_sequence.render()

    def export(self) -> dict[str, Any]:
        root = self.body_sequence.root
        return {
            "max_depth": self.body_sequence.max_depth,
            "return_probability": self.body_sequence.return_probability,
            "branches": self.body_sequence.num_branches,
            "tree": root.export() if root is not None else None,
        }
