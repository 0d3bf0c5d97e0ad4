# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Random guard conditions over parameters, external values and constants."""

from __future__ import annotations

from daedaluzz.nodes import RELATIONAL_OPERATORS, Condition

from .base import SequenceBase

CONST = 0
OPERAND = 1
CONST_PLUS_OPERAND = 2
OPERAND_PLUS_OPERAND = 3
CONST_TIMES_OPERAND = 4
OPERAND_TIMES_OPERAND = 5
NUM_SHAPES = 6


class RandomCondition(SequenceBase):
    """Synthesize one ``left OP right`` comparison per gen() call."""

    def __init__(self, daedaluzz: object, additional_inputs: tuple[str, ...] = ()) -> None:
        super().__init__(daedaluzz)
        self.num_params = self.config.num_params
        self.max_const = self.config.max_const
        self.additional_inputs = tuple(additional_inputs)

    def _operand(self) -> str:
        idx = self.random.randrange(self.num_params + len(self.additional_inputs))
        if idx < self.num_params:
            return f"p{idx}"
        return f"uint64({self.additional_inputs[idx - self.num_params]})"

    def _constant(self) -> str:
        c = self.random.getrandbits(64)
        # Out-of-range draws are folded, not redrawn; in-range draws are kept as is.
        if self.max_const < c:
            c = c % (self.max_const + 1)
        return f"uint64({c})"

    def _right(self) -> str:
        shape = self.random.randrange(NUM_SHAPES)
        if shape == CONST:
            return self._constant()
        if shape == OPERAND:
            return self._operand()
        if shape == CONST_PLUS_OPERAND:
            a = self._constant()
            return f"uint64({a} + {self._operand()})"
        if shape == OPERAND_PLUS_OPERAND:
            a = self._operand()
            return f"uint64({a} + {self._operand()})"
        if shape == CONST_TIMES_OPERAND:
            a = self._constant()
            return f"uint64({a} * {self._operand()})"
        a = self._operand()
        return f"uint64({a} * {self._operand()})"

    def gen(self) -> Condition:
        left = self._operand()
        right = self._right()
        op = RELATIONAL_OPERATORS[self.random.randrange(len(RELATIONAL_OPERATORS))]
        return Condition(left=left, op=op, right=right)
