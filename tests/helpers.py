# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Shared test helpers."""

from __future__ import annotations

import re

from daedaluzz.core.daedaluzz import Daedaluzz
from daedaluzz.core.gen_config import GenerationConfig

FAILURE_ID_RE = re.compile(r'AssertionFailed\("(\d+)"\)')


def make_daedaluzz(mode: str = "maze", **config_fields: object) -> Daedaluzz:
    return Daedaluzz(
        mode=mode,
        config=GenerationConfig(**config_fields),
        verbosity="error",
    )


def failure_ids(text: str) -> list[int]:
    return [int(m) for m in FAILURE_ID_RE.findall(text)]
