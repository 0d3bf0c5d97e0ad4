# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Stateless body: a binary decision tree of random guards."""

from __future__ import annotations

from daedaluzz.nodes import BodyNode, Branch, Leaf

from .base import SequenceBase
from .conditions import RandomCondition

TREE_INDENT = 3


class RandomTree(SequenceBase):
    """
    Build a decision tree down to ``max_depth`` nestings.

    A node becomes a leaf when the remaining depth is exhausted or when a uniform
    draw falls below ``return_probability``. Otherwise it becomes a branch whose
    "then" subtree is built completely before its "else" subtree, so leaf ids
    follow depth-first, left-to-right order.
    """

    def __init__(
        self,
        daedaluzz: object,
        max_depth: int | None = None,
        return_probability: float | None = None,
    ) -> None:
        super().__init__(daedaluzz)
        shape = self.config.tree
        self.max_depth = shape.max_depth if max_depth is None else max_depth
        self.return_probability = (
            shape.return_probability if return_probability is None else return_probability
        )
        self.conditions = RandomCondition(daedaluzz, self.config.tree_inputs())
        self.num_branches = 0
        self.root: BodyNode | None = None

    def _node(self, depth: int) -> BodyNode:
        if depth < 1 or self.random.random() < self.return_probability:
            return Leaf(self.registry.next_id())
        condition = self.conditions.gen()
        self.num_branches += 1
        then_body = self._node(depth - 1)
        else_body = self._node(depth - 1)
        return Branch(condition, then_body, else_body)

    def gen(self) -> BodyNode:
        self.root = self._node(self.max_depth)
        self.log.debug(
            f"Built tree with {self.num_branches} branches and {self.registry.count} leaves"
        )
        return self.root

    def render(self) -> str:
        if self.root is None:
            self.gen()
        return self.root.render(TREE_INDENT)
