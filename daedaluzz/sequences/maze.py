# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Stateful body: a grid of independent guard chains."""

from __future__ import annotations

from typing import Iterator

from daedaluzz.nodes import Chain, GridCell, Leaf, Start, Wall

from .base import SequenceBase
from .conditions import RandomCondition

CELL_INDENT = 3


class RandomMaze(SequenceBase):
    """Yield one GridCell per coordinate, x outer and y inner.

    Every cell except the origin draws its own chain depth from ``[0, max_depth]``.
    Depths below ``min_depth`` give a wall; anything else gives a chain of that many
    nested guards ending in a freshly numbered leaf.
    """

    def __init__(self, daedaluzz: object) -> None:
        super().__init__(daedaluzz)
        shape = self.config.maze
        self.dim_x = shape.dim_x
        self.dim_y = shape.dim_y
        self.min_depth = shape.min_depth
        self.max_depth = shape.max_depth
        self.conditions = RandomCondition(daedaluzz, self.config.maze_inputs())
        self.cells: list[GridCell] = []

    def _chain(self, depth: int) -> Chain:
        conditions = tuple(self.conditions.gen() for _ in range(depth))
        return Chain(conditions, Leaf(self.registry.next_id()))

    def _cell(self, x: int, y: int, index: int) -> GridCell:
        if x == 0 and y == 0:
            return GridCell(x, y, index, Start())
        depth = self.random.randint(0, self.max_depth)
        if depth < self.min_depth:
            return GridCell(x, y, index, Wall(), drawn_depth=depth)
        return GridCell(x, y, index, self._chain(depth), drawn_depth=depth)

    def gen(self) -> Iterator[GridCell]:
        index = 0
        for x in range(self.dim_x):
            for y in range(self.dim_y):
                cell = self._cell(x, y, index)
                self.cells.append(cell)
                self.log.debug(f"Cell ({x}, {y}): {type(cell.body).__name__}")
                yield cell
                index += 1

    @property
    def num_cells(self) -> int:
        return self.dim_x * self.dim_y

    def render(self) -> str:
        if not self.cells:
            for _ in self.gen():
                pass
        return "".join(cell.render(CELL_INDENT) for cell in self.cells)
