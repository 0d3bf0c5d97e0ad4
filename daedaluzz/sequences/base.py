# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Base class for sequences; provides the run's random stream, config and registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from daedaluzz.core.gen_config import GenerationConfig
    from daedaluzz.core.registry import FailureRegistry


class SequenceBase:
    """
    Minimal base for sequences: daedaluzz, random, config, registry.

    All draws go through ``self.random``, the single seeded stream owned by the
    run, so the order in which sequences call gen() fixes the program text.
    """

    def __init__(self, daedaluzz: object) -> None:
        self.daedaluzz = daedaluzz
        self.random = daedaluzz.random
        self.config: GenerationConfig = daedaluzz.config
        self.registry: FailureRegistry = daedaluzz.registry
        self.name = self.__class__.__name__
        self.log = daedaluzz.log.getChild(self.name)
