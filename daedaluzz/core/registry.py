# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Failure id bookkeeping for one generation run."""

from __future__ import annotations

import itertools


class FailureRegistry:
    """
    Hands out dense, zero-based failure ids.

    One registry belongs to one run; ids are assigned at leaf creation, so the
    number handed out equals the number of failure markers in the program.
    """

    def __init__(self) -> None:
        self._ids = itertools.count()
        self.count = 0

    def next_id(self) -> int:
        failure_id = next(self._ids)
        self.count = failure_id + 1
        return failure_id
