# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Body nodes produced by the builders and rendered into Solidity text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from daedaluzz.utils import indent

RELATIONAL_OPERATORS = ("<", ">", "<=", ">=", "==", "!=")


@dataclass(frozen=True)
class Condition:
    """Guard expression ``left OP right`` over already-rendered operands."""

    left: str
    op: str
    right: str

    def __str__(self) -> str:
        return f"{self.left} {self.op} {self.right}"


@dataclass(frozen=True)
class Leaf:
    """Always-failing assertion tagged with a unique failure id."""

    failure_id: int

    def render(self, level: int) -> str:
        return (
            f'{indent(level)}emit AssertionFailed("{self.failure_id}"); '
            f"assert(false); return {self.failure_id};"
        )

    def render_in_chain(self, level: int) -> str:
        # Maze cells return their cell index after the guard, not the failure id.
        return f'{indent(level)}emit AssertionFailed("{self.failure_id}"); assert(false);  // bug'

    def export(self) -> dict[str, Any]:
        return {"leaf": self.failure_id}


@dataclass(frozen=True)
class Branch:
    """Two-armed conditional of the decision tree."""

    condition: Condition
    then_body: BodyNode
    else_body: BodyNode

    def render(self, level: int) -> str:
        pad = indent(level)
        return (
            f"{pad}if ({self.condition}) {{\n"
            f"{self.then_body.render(level + 1)}\n"
            f"{pad}}} else {{\n"
            f"{self.else_body.render(level + 1)}\n"
            f"{pad}}}"
        )

    def export(self) -> dict[str, Any]:
        return {
            "if": str(self.condition),
            "then": self.then_body.export(),
            "else": self.else_body.export(),
        }


BodyNode = Union[Branch, Leaf]


@dataclass(frozen=True)
class Chain:
    """Linear run of nested single-armed guards ending in a leaf."""

    conditions: tuple[Condition, ...]
    leaf: Leaf

    @property
    def depth(self) -> int:
        return len(self.conditions)

    def render(self, level: int) -> str:
        text = self.leaf.render_in_chain(level + self.depth)
        for nesting in reversed(range(self.depth)):
            pad = indent(level + nesting)
            text = f"{pad}if ({self.conditions[nesting]}) {{\n{text}\n{pad}}}"
        return text

    def export(self) -> dict[str, Any]:
        return {
            "kind": "chain",
            "depth": self.depth,
            "failure_id": self.leaf.failure_id,
            "conditions": [str(c) for c in self.conditions],
        }


class Wall:
    """Impassable cell: its guard always fails and it carries no failure id."""

    def render(self, level: int) -> str:
        return f"{indent(level)}require(false);  // wall"

    def export(self) -> dict[str, Any]:
        return {"kind": "wall"}


class Start:
    """Trivial body of the origin cell."""

    def render(self, level: int) -> str:
        return f"{indent(level)}// start"

    def export(self) -> dict[str, Any]:
        return {"kind": "start"}


CellBody = Union[Chain, Wall, Start]


@dataclass
class GridCell:
    """One maze cell; ``index`` is the row-major value returned by the dispatcher."""

    x: int
    y: int
    index: int
    body: CellBody
    drawn_depth: Optional[int] = None

    @property
    def failure_id(self) -> Optional[int]:
        if isinstance(self.body, Chain):
            return self.body.leaf.failure_id
        return None

    def render(self, level: int) -> str:
        pad = indent(level)
        return (
            f"{pad}if (x == {self.x} && y == {self.y}) {{\n"
            f"{self.body.render(level + 1)}\n"
            f"{pad}  return {self.index};\n"
            f"{pad}}}\n"
        )

    def export(self) -> dict[str, Any]:
        out: dict[str, Any] = {"x": self.x, "y": self.y, "index": self.index}
        out.update(self.body.export())
        if self.drawn_depth is not None:
            out["drawn_depth"] = self.drawn_depth
        return out
