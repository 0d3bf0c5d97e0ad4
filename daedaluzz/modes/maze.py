# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Stateful maze mode: four movement functions sharing one step dispatcher."""

from typing import Any

from daedaluzz.core.generator_base import GeneratorBase, Mode
from daedaluzz.sequences.maze import RandomMaze

SKELETON = """pragma solidity ^0.8.19;
/// automatically generated by Daedaluzz
/// failure markers: $leaf_count
contract Maze {
  event AssertionFailed(string message);
  uint64 private x;
  uint64 private y;
  function moveNorth($params) payable external returns (int64) {
    uint64 ny = y + 1;
    require(ny < $dim_y);
    y = ny;
    return step($args);
  }
  function moveSouth($params) payable external returns (int64) {
    require(0 < y);
    uint64 ny = y - 1;
    y = ny;
    return step($args);
  }
  function moveEast($params) payable external returns (int64) {
    uint64 nx = x + 1;
    require(nx < $dim_x);
    x = nx;
    return step($args);
  }
  function moveWest($params) payable external returns (int64) {
    require(0 < x);
    uint64 nx = x - 1;
    x = nx;
    return step($args);
  }
  function step($params) internal returns (int64) {
    unchecked {
${body}      return $cell_count;
    }
  }
}
"""


class Generator(GeneratorBase):
    mode = Mode.MAZE
    skeleton = SKELETON

    def __init__(self, daedaluzz: object) -> None:
        super().__init__(daedaluzz)
        self.body_sequence = RandomMaze(daedaluzz)

    def gen(self) -> str:
        walls = 0
        for cell in self.body_sequence.gen():
            if cell.drawn_depth is not None and cell.failure_id is None:
                walls += 1
        self.daedaluzz.debug(f"Maze has {walls} walls")
        return self.body_sequence.render()

    def placeholders(self, body: str) -> dict[str, Any]:
        out = super().placeholders(body)
        out["dim_x"] = self.body_sequence.dim_x
        out["dim_y"] = self.body_sequence.dim_y
        out["cell_count"] = self.body_sequence.num_cells
        return out

    def export(self) -> dict[str, Any]:
        return {
            "dim_x": self.body_sequence.dim_x,
            "dim_y": self.body_sequence.dim_y,
            "min_depth": self.body_sequence.min_depth,
            "max_depth": self.body_sequence.max_depth,
            "cells": [cell.export() for cell in self.body_sequence.cells],
        }
