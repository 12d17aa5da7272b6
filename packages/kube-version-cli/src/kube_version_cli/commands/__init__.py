# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import parse, sort, check

__all__ = ["parse", "sort", "check"]
