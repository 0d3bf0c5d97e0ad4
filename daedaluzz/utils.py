# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Shared constants and small text helpers."""

VERSION = "0.0.1"

INDENT_UNIT = "  "


def indent(level: int) -> str:
    return INDENT_UNIT * level
