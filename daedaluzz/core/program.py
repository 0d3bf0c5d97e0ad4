# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Program skeletons: placeholder checking, substitution and writing the artifact."""

from __future__ import annotations

from pathlib import Path
from string import Template
from typing import Any


class ProgramError(Exception):
    """Raised when the program text cannot be produced from its skeleton."""


class SkeletonError(ProgramError):
    """The skeleton itself is malformed."""


class SubstitutionError(ProgramError):
    """The skeleton could not be filled with the generated values."""


def parse_skeleton(text: str, name: str = "program") -> Template:
    """Return a Template for ``text``; raise SkeletonError on a malformed placeholder."""
    skeleton = Template(text)
    if not skeleton.is_valid():
        raise SkeletonError(f"Skeleton '{name}' contains an invalid placeholder")
    return skeleton


def render_program(skeleton: Template, placeholders: dict[str, Any]) -> str:
    """Substitute every placeholder. Substitutions are independent of each other."""
    missing = sorted(set(skeleton.get_identifiers()) - set(placeholders))
    if missing:
        raise SubstitutionError(f"No value for placeholder(s): {', '.join(missing)}")
    try:
        return skeleton.substitute(placeholders)
    except (KeyError, ValueError) as e:
        raise SubstitutionError(f"Cannot fill skeleton: {e}") from e


def write_program(path: Path, text: str) -> None:
    """Write the program to ``path``; OSError propagates to the caller."""
    with open(path, "w") as f:
        f.write(text)
